import sys

from four_letter_sequences.cli import main

sys.exit(main())
