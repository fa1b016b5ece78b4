import sys

from ad_cli.cli import main

sys.exit(main())
