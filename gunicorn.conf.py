# gunicorn.conf.py
# Run with: gunicorn -c gunicorn.conf.py "app:create_app()"
import os
import logging
import sys

# Configure logging to stdout
accesslog = '-'
errorlog = '-'
loglevel = os.getenv('LOG_LEVEL', 'info').lower()

# Get PORT from environment or use default
port = os.getenv('PORT', '8080')
bind = f"0.0.0.0:{port}"

# One process: SQLite and the single-user stores are not shared between workers
workers = 1
threads = 4  # Use threading for I/O bound AI calls

# Log configuration on startup
def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting gunicorn with {workers} worker and {threads} threads on port {port}")

# AI calls time out after at most 15 seconds
timeout = 30
keepalive = 5
worker_class = "gthread"

# Process naming
proc_name = "abba_bible"
default_proc_name = "abba_bible"

# Graceful server restart
graceful_timeout = 30
