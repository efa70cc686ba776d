"""
courseindex.config.defaults - Default configuration values.
"""

CONFIG_FILENAME = ".courseindex.toml"

ENV_PREFIX = "COURSEINDEX_"

DEFAULT_CONFIG = {
    "catalog": {
        "default_file": "CS 300 ABCU_Advising_Program_Input.csv",
        "delimiter": ",",
        "encoding": "utf-8",
    },
    "logging": {
        "level": "WARNING",
    },
}
