import os
import sys
import logging
from dotenv import load_dotenv

from display_devices import enumerate_display_devices, get_current_settings
from topology import DisplayMode, choose_mode
from mode_switcher import DISPLAYSWITCH_EXE, set_display_mode
from monitor_inventory import get_monitor_details, print_monitor_details

def load_config():
    """Read overrides from the environment (and a .env file next to the working dir)."""
    load_dotenv()
    return {
        "displayswitch_exe": os.getenv("DISPLAYSWITCH_EXE", DISPLAYSWITCH_EXE),
        "log_file": os.getenv("DISPLAY_SWITCH_LOG_FILE", ""),
        "log_level": os.getenv("DISPLAY_SWITCH_LOG_LEVEL", "INFO").upper(),
    }

def setup_logging(log_file, level="INFO"):
    root = logging.getLogger('')
    root.setLevel(getattr(logging, level, logging.INFO))

    # Console only gets problems; stdout is reserved for the report.
    # Tracebacks stay off it, the interpreter prints those when main() re-raises.
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING)
    console.addFilter(lambda record: not record.exc_info)
    root.addHandler(console)

    if not log_file:
        return
    try:
        # UTF-8 so adapter names with non-ASCII characters don't break the log
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
    except OSError as e:
        logging.warning(f"Log file {log_file} unavailable, logging to console only: {e}")
        return
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    root.addHandler(file_handler)

def log(msg):
    logging.info(msg)
    print(msg)

def log_device_settings(records):
    for record in records:
        if not record.attached_to_desktop:
            continue
        settings = get_current_settings(record.device_name)
        primary = " (primary)" if record.primary else ""
        logging.info(f"{record.device_name}{primary}: {record.device_string} {settings or 'no current mode'}")

def run(config):
    log("Checking display mode...")
    records = enumerate_display_devices()
    log_device_settings(records)

    mode = choose_mode(records)
    if mode is DisplayMode.EXTEND:
        log("Only primary monitor is enabled. Switching to extend mode...")
    else:
        log("Multiple monitors detected or already in extend mode.")
    set_display_mode(mode, executable=config["displayswitch_exe"])

    print_monitor_details(get_monitor_details())

def main():
    config = load_config()
    setup_logging(config["log_file"], config["log_level"])
    try:
        run(config)
    except Exception:
        logging.exception("Display switch failed")
        raise

if __name__ == "__main__":
    main()
