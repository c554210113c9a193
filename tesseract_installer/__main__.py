# tesseract_installer/__main__.py
import sys

from tesseract_installer.main_installer import main

sys.exit(main())
