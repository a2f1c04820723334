APP_NAME = "gitsigning"
ENV_PREFIX = "GITSIGNING_"
