"""
Erros de domínio da API

Cada erro carrega o status HTTP e a mensagem exibida ao cliente.
Os handlers registrados em gaj.main convertem para {"error": mensagem}.
"""


class GajError(Exception):
    status_code = 500
    message = "Erro interno"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(GajError):
    status_code = 400
    message = "Dados inválidos"


class InvalidTimeWindow(ValidationError):
    message = "Horário inválido"

    @classmethod
    def for_window(cls, start: str, end: str) -> "InvalidTimeWindow":
        return cls(f"Horário inválido (deve ser entre {start} e {end})")


class DuplicateEmail(GajError):
    status_code = 409
    message = "Email já cadastrado"


class NotFound(GajError):
    status_code = 404
    message = "Registro não encontrado"


class PendingApproval(GajError):
    status_code = 403
    message = "Aguardando aprovação"


class InvalidCredentials(GajError):
    status_code = 401
    message = "Senha incorreta"


class Unauthorized(GajError):
    status_code = 401
    message = "Token ausente ou inválido"


class Forbidden(GajError):
    status_code = 403
    message = "Privilégios de administrador necessários"


class InternalError(GajError):
    status_code = 500
    message = "Erro interno"
