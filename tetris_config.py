
CONFIG = {
    "BLOCK_SIZE": 24,
    "DROP_INTERVAL_MS": 1000,
    "SCORE_PER_LINE": 10,
    "FPS": 60,
    "SEED": None,
    "LOG_LEVEL": "INFO",
    "LOG_RICH": True,
}
