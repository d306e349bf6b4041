from apps.pastes.application.paste.queries.get_paste import GetPasteQuery
from apps.pastes.application.paste.queries.list_pastes import ListPastesQuery

__all__ = ["GetPasteQuery", "ListPastesQuery"]
