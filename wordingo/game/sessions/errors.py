class GameSessionError(Exception):
    pass


class ConfigurationError(GameSessionError):
    pass


class InvalidStateError(GameSessionError):
    pass
