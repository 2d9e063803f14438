import os

# Tests never touch the configured database.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["API_KEYS"] = ""
os.environ["JWT_SECRET"] = ""
