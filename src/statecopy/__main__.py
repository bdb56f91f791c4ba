import sys

from statecopy.demo import main

sys.exit(main())
