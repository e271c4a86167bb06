"""Run the powerplan CLI from a checkout.

Example:
    python run_cli.py generate --squat 150 --bench 100 --deadlift 180 --weeks 4
"""

from cli.cli import app

if __name__ == "__main__":
    app()
