"""
Launcher script for the Khmer Scribe Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="Khmer Scribe Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--server-port", type=int, default=8000, help="Port where the FastAPI server is running")
    parser.add_argument("--api-url", help="URL of the API server (default: http://localhost:8000)")
    args = parser.parse_args()

    project_dir = Path(__file__).parent.absolute()
    app_path = project_dir / "khmerscribe" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()
    api_url = args.api_url or f"http://localhost:{args.server_port}"
    env["API_URL"] = api_url

    # Make the package importable from the streamlit script
    env["PYTHONPATH"] = str(project_dir) + os.pathsep + env.get("PYTHONPATH", "")

    print(f"Starting Khmer Scribe Streamlit app on port {args.port}")
    print(f"API server is expected to be running at: {api_url}")

    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.serverAddress", "localhost",
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except subprocess.CalledProcessError as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
