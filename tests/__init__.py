import os
import tempfile

# Keep logs and settings out of the real user data folder, and let Qt run without a display.
os.environ.setdefault("CDT_HOME", tempfile.mkdtemp(prefix="cdt_tests_"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
