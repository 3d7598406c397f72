"""Run Streamlit app from project root. Use: python run_app.py (start run_api.py first)."""
import os
import subprocess
import sys

root = os.path.dirname(os.path.abspath(__file__))
app_path = os.path.join(root, "cv_review_ai", "app.py")
env = dict(os.environ, PYTHONPATH=os.pathsep.join(p for p in (root, os.environ.get("PYTHONPATH", "")) if p))
subprocess.run([sys.executable, "-m", "streamlit", "run", app_path], check=True, cwd=root, env=env)
