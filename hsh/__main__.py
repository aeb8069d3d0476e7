import sys

from hsh.shell import main

sys.exit(main())
