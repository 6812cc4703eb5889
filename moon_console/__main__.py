import sys

from moon_console.cli.app import main

sys.exit(main())
