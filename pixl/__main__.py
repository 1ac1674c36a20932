import sys

from pixl.cli.app import main

sys.exit(main())
