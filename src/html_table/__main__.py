import sys

from html_table.cli import main

sys.exit(main())
