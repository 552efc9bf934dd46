import sys

from createqrcode.cli import main

sys.exit(main())
