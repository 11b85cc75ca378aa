# --- utils.py ---

import sys
import time
import threading
from colorama import Fore, Style, init

init()

# Text encoding of dictionary files and graph payloads
ENCODING = "utf-8"

# Seconds to wait for a remote word list
DEFAULT_TIMEOUT = 30

VERBOSE = False
TRACE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()


def _elapsed():
    global start_time
    if start_time is None:
        start_time = time.time()
    return time.time() - start_time


def log_with_time(msg, color=Fore.LIGHTBLUE_EX, file=None):
    """Print ``msg`` with a timestamp."""
    elapsed = _elapsed()
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", file=file or sys.stderr, flush=True)


def vlog(msg, t0=None):
    if VERBOSE or TRACE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)


def tlog(msg):
    if TRACE:
        log_with_time(msg, color=Style.DIM)


def log_error(err):
    """Print an error and the chain of its causes in red."""
    log_with_time(f"ERROR: {err}", color=Fore.RED)
    cause = err.__cause__
    while cause is not None:
        log_with_time(f"because: {cause}", color=Fore.RED)
        cause = cause.__cause__
