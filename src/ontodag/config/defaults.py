"""
ontodag.config.defaults - Default configuration values.
"""

CONFIG_FILENAME = ".ontodag.toml"
ENV_PREFIX = "ONTODAG_"

DEFAULT_CONFIG = {
    "parser": {
        "field_delimiter": " ; ",
        "comment_prefix": "!",
        "synonym_prefix": "synonym:",
        "encoding": "utf-8",
    },
    "search": {
        "url": "http://localhost:8983/solr",
        "collection": "ontology",
        "timeout": 10,
        "batch_size": 500,
        "commit": True,
    },
    "output": {
        "format": "json",
        "indent": 2,
    },
}
