import sys
from notemanager.cli import main

sys.exit(main())
