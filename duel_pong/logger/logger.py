"""
Logging module for the project
"""

import logging

# Set up logging
# Change logging level to DEBUG to see every bounce
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger("duel_pong")
