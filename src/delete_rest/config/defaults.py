"""預設設定值。"""

DEFAULT_CONFIG = {
    "name": "default_all",
    "extensions": [],
    "formats": [r"\D*(\d+)\D*"],
    "default_destination": "selected",
    "keepfile_name": "keep.txt",
    "config_name": "config.yaml",
    "retry": {
        "max_retries": 0,
        "backoff_base_sec": 0.5,
        "backoff_cap_sec": 5.0,
    },
}
