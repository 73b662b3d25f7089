"""
Ошибки каталога и заказов.

CRUD-слой их поднимает, API-слой превращает каждую в HTTP-ответ
со статусом status_code и телом {"error": code}.
"""


class CafePosError(Exception):
    """Базовый класс всех ошибок сервиса."""

    code = "error"
    status_code = 500


class InvalidRequest(CafePosError):
    """Некорректный запрос: неизвестный tier, lines не список, битая позиция."""

    code = "invalid_body"
    status_code = 400


class ReferenceNotFound(CafePosError):
    """Позиция заказа ссылается на товар, которого нет в каталоге."""

    status_code = 400

    def __init__(self, item_id: str):
        super().__init__(f"Item with id={item_id!r} not found")
        self.item_id = item_id

    @property
    def code(self) -> str:
        return f"item_not_found:{self.item_id}"


class StorageFailure(CafePosError):
    """Атомарная запись не прошла. Ничего не сохранено, запрос можно повторить."""

    code = "storage_failure"
    status_code = 503


class DuplicateItem(CafePosError):
    code = "duplicate_item"
    status_code = 409

    def __init__(self, item_id: str):
        super().__init__(f"Item with id={item_id!r} already exists")
        self.item_id = item_id


class NotFound(CafePosError):
    code = "not_found"
    status_code = 404


class Unauthorized(CafePosError):
    code = "unauthorized"
    status_code = 401


class InvalidCredentials(CafePosError):
    code = "invalid_credentials"
    status_code = 401
