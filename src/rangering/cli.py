import sys
from pathlib import Path

from streamlit.web import cli as stcli


def main():
    """Launch the Streamlit app, passing any extra arguments to ``streamlit run``."""
    app = Path(__file__).with_name("main.py")
    sys.argv = ["streamlit", "run", str(app), *sys.argv[1:]]
    sys.exit(stcli.main())
