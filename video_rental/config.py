class Config:
    SECRET_KEY = "dev-secret-change-me"
    # Used when a statement request carries no ?format=
    DEFAULT_STATEMENT_FORMAT = "text"
    # Seed the demo catalog on startup
    SEED_DEMO_DATA = False
