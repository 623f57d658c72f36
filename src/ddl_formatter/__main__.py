import sys

from ddl_formatter.cli import main

sys.exit(main())
