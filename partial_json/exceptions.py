class FieldsSyntaxError(ValueError):
    """Некорректная строка селектора полей: сообщение и позиция символа."""

    def __init__(self, message: str, position: int):
        super().__init__(f'{message} (at position {position})')
        self.message = message
        self.position = position


class ConfigurationError(ValueError):
    pass
