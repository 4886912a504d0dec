# Ensures `import eks_demo` works from a plain checkout (package lives under backend/)
import sys, os
from pathlib import Path
ROOT = Path(__file__).resolve().parent
PKG_DIR = ROOT / "backend"
if str(PKG_DIR) not in sys.path:
    sys.path.insert(0, str(PKG_DIR))

# Tests never report errors to Sentry
os.environ.pop("SENTRY_DSN", None)
