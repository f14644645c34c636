import sys

from sysbar.main import main

sys.exit(main())
