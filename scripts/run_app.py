#!/usr/bin/env python3
"""
Run the order volume hook runner with PYTHONPATH=src (works on Windows and Unix).
Usage: python scripts/run_app.py [args...]
Example: python scripts/run_app.py --order resources/order.json --unit cm
         python scripts/run_app.py --order order.json --extension my_ext:pad_volume --on-error abort
"""
import os
import subprocess
import sys

script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(script_dir)
src = os.path.join(project_root, "src")
app_script = os.path.join(src, "app.py")

env = os.environ.copy()
# keep the project root importable so extensions can live outside src
env["PYTHONPATH"] = os.pathsep.join([src, project_root])

sys.exit(
    subprocess.run(
        [sys.executable, app_script] + sys.argv[1:],
        cwd=project_root,
        env=env,
    ).returncode
)
