import sys

from tatu.cli import main

sys.exit(main())
