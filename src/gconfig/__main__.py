import sys

from gconfig.cli import main

sys.exit(main())
