DEFAULT_PATH_TEMPLATE = "/etc/postgresql/{version}/main/postgresql.conf"
VERSION_PLACEHOLDER = "{version}"
DEFAULT_CONFIG_FILE = ".pgconfappend.yml"

SETTINGS_BLOCK = (
    "client_min_messages=warning",
    "autovacuum=off",
    "fsync=off",
    "zdb.default_elasticsearch_url = 'http://localhost:9200/'",
    "zdb.log_level = LOG",
    "zdb.default_replicas = 0",
)
