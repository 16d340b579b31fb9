import logging
from typing import Callable, List, Optional

from logic.backend import case_title, normalize_email, slugify
from logic.identity_store import IdentityStore
from model.models import CaseRow, RemoteResult

logger = logging.getLogger(__name__)


class Dashboard:
    """
    Session state of the instructor dashboard.

    Holds the current identity and everything derived from it. The case list is
    never patched in place: every mutation is followed by a full reload.
    """

    def __init__(self, repository, identity_store: IdentityStore,
                 on_change: Optional[Callable[[], None]] = None):
        self.repository = repository
        self.identity_store = identity_store
        self.on_change = on_change

        self.email: Optional[str] = None
        self.cases: List[CaseRow] = []
        self.loading = False
        self.creating = False
        self.deleting: Optional[str] = None
        self.last_error: Optional[str] = None

        # form inputs
        self.email_input = ""
        self.new_id = ""
        self.new_title = ""

    # ---------- identity ----------
    def start(self) -> bool:
        """Read the stored identity and load its cases. Returns True when known."""
        stored = self.identity_store.get()
        if not stored:
            self.loading = False
            return False
        self.email = stored
        self.load_cases()
        return True

    def submit_email(self, raw: Optional[str] = None) -> bool:
        if raw is not None:
            self.email_input = raw
        email = normalize_email(self.email_input)
        if not email:
            return False
        self.identity_store.set(email)
        self.email = email
        self.load_cases()
        return True

    def switch_user(self) -> None:
        self.identity_store.clear()
        logger.info("Switching away from %s", self.email)
        self.email = None
        self.email_input = ""
        self.new_id = ""
        self.new_title = ""
        self.cases = []
        self.loading = False
        self.creating = False
        self.deleting = None
        self.last_error = None
        self._changed()

    # ---------- listing ----------
    def load_cases(self) -> None:
        if not self.email:
            return
        self.loading = True
        self._changed()
        result = self.repository.list_cases(self.email)
        self.cases = list(result.data) if result.ok else []
        self._record(result)
        self.loading = False
        self._changed()

    # ---------- mutations ----------
    def create_case(self, raw_id: Optional[str] = None, raw_title: Optional[str] = None) -> bool:
        """Insert a case from the form inputs; an empty slug is a silent no-op."""
        if raw_id is not None:
            self.new_id = raw_id
        if raw_title is not None:
            self.new_title = raw_title
        if not self.email:
            return False
        slug = slugify(self.new_id)
        if not slug:
            return False

        self.creating = True
        self._changed()
        result = self.repository.insert_case(slug, case_title(self.new_title), self.email)

        self.new_id = ""
        self.new_title = ""
        self.creating = False
        self.load_cases()
        # the reload must not hide an insert failure
        if not result.ok:
            self.last_error = result.error
        self._changed()
        return result.ok

    def delete_case(self, case_id: str, title: str, confirm: Callable[[str], bool]) -> bool:
        if not self.email:
            return False
        if not confirm(delete_prompt(title)):
            return False

        self.deleting = case_id
        self._changed()
        result = self.repository.delete_responses(case_id)
        if result.ok:
            result = self.repository.delete_case(case_id)
        else:
            logger.warning("Keeping case %s because its responses could not be deleted", case_id)

        self.deleting = None
        self.load_cases()
        if not result.ok:
            self.last_error = result.error
        self._changed()
        return result.ok

    # ---------- view helpers ----------
    def can_create(self) -> bool:
        return bool(self.new_id.strip()) and not self.creating

    def can_continue(self) -> bool:
        return bool(self.email_input.strip())

    def _record(self, result: RemoteResult) -> None:
        self.last_error = None if result.ok else result.error

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()


def delete_prompt(title: str) -> str:
    return f'Delete case "{title}"? All responses will be permanently deleted.'
