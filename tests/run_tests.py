# run_tests.py
import subprocess
import sys
from pathlib import Path

if __name__ == "__main__":
    project_root = Path(__file__).resolve().parent.parent
    cmd = [sys.executable, "-m", "pytest", "tests", *sys.argv[1:]]
    raise SystemExit(subprocess.run(cmd, cwd=project_root).returncode)
