"""
Start the local HTTP bridge for the browser visualizer.

Usage: python tools/py_bridge_server.py [--host 127.0.0.1] [--port 5000]
Health check: http://127.0.0.1:5000/py-bridge/health
"""
import sys
import os
import argparse
import importlib

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


# Fail loudly and helpfully if required Python packages are missing.
def _require_modules(mods):
    missing = []
    for m in mods:
        try:
            importlib.import_module(m)
        except ImportError:
            missing.append(m)
    if missing:
        print("\nERROR: Missing required Python package(s): {}".format(', '.join(missing)))
        print("Install them with:")
        print("  python -m pip install -e .")
        sys.exit(1)


_require_modules(['flask', 'matplotlib', 'numpy'])

from LESV.SMM.constants import BRIDGE_HOST, BRIDGE_PORT
from LESV.SViz.bridge_server import app


def main():
    parser = argparse.ArgumentParser(description="Line encoding HTTP bridge")
    parser.add_argument("--host", default=BRIDGE_HOST, help=f"Bind address, default {BRIDGE_HOST}")
    parser.add_argument("--port", type=int, default=BRIDGE_PORT, help=f"Port, default {BRIDGE_PORT}")
    args = parser.parse_args()

    print(f"[INFO] Bridge listening on http://{args.host}:{args.port}/py-bridge/health")
    app.run(host=args.host, port=args.port)


if __name__ == '__main__':
    main()
