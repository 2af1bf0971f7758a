"""
Same as the `voicecalc` command:

    py -m voicecalc "twenty one plus two times three"
"""
import sys
from .cmdline import main

sys.exit(main())
