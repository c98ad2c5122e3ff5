class SemanticError(Exception):
    def __init__(self, msg, line=None, col=None):
        self.line = line
        self.col = col
        where = f" (línea {line}, col {col})" if line is not None else ""
        super().__init__(msg + where)


class DuplicateDeclarationError(SemanticError):
    """Un nombre se declaró dos veces en el mismo ámbito. Es fatal para el pase."""

    def __init__(self, name, line=None, col=None):
        self.name = name
        # El mensaje es el contrato de salida: no lleva la posición
        super().__init__(f"DECLARATION ERROR {name}")
        self.line = line
        self.col = col
