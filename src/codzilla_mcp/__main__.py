import sys

from codzilla_mcp.cli import main

sys.exit(main())
