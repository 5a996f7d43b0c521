"""
Tests for environment configuration
"""

from q3status.config import Config


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ('Q3_HOST', 'Q3_READ_TIMEOUT', 'Q3_WRITE_TIMEOUT',
                     'Q3_MAX_RESPONSE_SIZE', 'LOG_LEVEL'):
            monkeypatch.delenv(name, raising=False)

        config = Config.from_env()
        assert config.HOST is None
        assert config.READ_TIMEOUT == 5
        assert config.WRITE_TIMEOUT == 5
        assert config.MAX_RESPONSE_SIZE == 65535
        assert config.LOG_LEVEL == 'WARNING'

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv('Q3_HOST', 'q3.example.org:27961')
        monkeypatch.setenv('Q3_READ_TIMEOUT', '1.5')
        monkeypatch.setenv('Q3_WRITE_TIMEOUT', '2')
        monkeypatch.setenv('Q3_MAX_RESPONSE_SIZE', '4096')

        config = Config.from_env()
        assert config.HOST == 'q3.example.org:27961'

        options = config.client_options()
        assert options.read_timeout == 1.5
        assert options.write_timeout == 2
        assert options.max_response_size == 4096
