import sys

from smol_editor.adapters.terminal.app import main

sys.exit(main())
