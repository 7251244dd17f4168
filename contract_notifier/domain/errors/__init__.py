class NotifierError(Exception):
    pass


class LoadError(NotifierError):
    def __init__(self, uri: str, reason: str = "", status: int | None = None):
        self.uri = uri
        self.reason = reason
        self.status = status
        super().__init__(f"Falha ao carregar {uri}: {reason}" if reason else f"Falha ao carregar {uri}")


class ValidationCheckError(NotifierError):
    pass


class TemplateNotFound(NotifierError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Modelo de e-mail não encontrado: {key}")


class ResolutionError(NotifierError):
    def __init__(self, contract_uri: str):
        self.contract_uri = contract_uri
        super().__init__(f"Não foi possível resolver o responsável do contrato {contract_uri}")
