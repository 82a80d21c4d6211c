import os

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_INPUT_PATH = os.environ.get(
    "SCHOLARSHIP_INPUT",
    os.path.join(PROJECT_ROOT, "Files", "ScholarshipApplications.csv"),
)
LOG_LEVEL = os.environ.get("SCHOLARSHIP_LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("SCHOLARSHIP_HOST", "0.0.0.0")
# parsed by the server entry point only
PORT = os.environ.get("SCHOLARSHIP_PORT", "8000")
