from artledger import config


def export(func):
    # Only exported methods can be dispatched by the Executor
    setattr(func, config.EXPORT_ATTRIBUTE, True)
    return func


def is_exported(func):
    return getattr(func, config.EXPORT_ATTRIBUTE, False) is True
