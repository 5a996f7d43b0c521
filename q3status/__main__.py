import sys

from q3status.main import main

sys.exit(main())
