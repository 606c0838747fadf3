class Constants:
    ON_ERROR_KEY = "hooks.order_volume.on_error"
    ON_ERROR_CONTINUE = "continue"
    ON_ERROR_ABORT = "abort"
    ON_ERROR_POLICIES = (ON_ERROR_CONTINUE, ON_ERROR_ABORT)
    DEFAULT_UNIT_KEY = "cli.default_unit"
