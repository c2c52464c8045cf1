import sys
from pathlib import Path

# Ensure project root is on path when the package is not installed
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))
