"""Tracked resource state exchanged with the host"""

import typing as t
import logging
from dotmap import DotMap
from .debug import debug
from .utils import prettystr

logger = logging.getLogger(__name__)

MISSING = object()
"""Sentinel for a dotted key that does not resolve"""


def plain(value: t.Any) -> t.Any:
    """Return ``value`` with any DotMap (also inside lists) turned into a dict"""
    if isinstance(value, DotMap):
        return value.toDict()
    if isinstance(value, list):
        return [plain(item) for item in value]
    return value


class ResourceData:
    """
    The state of one resource instance as the host hands it over.

    The host builds one per lifecycle call:

    .. code-block:: python

       ResourceData(state=desired)                          # create
       ResourceData(id=ident, state=last_known)             # read / delete
       ResourceData(id=ident, state=desired, prior=last_known)  # update

    ``state`` is the working view. Reads overwrite it with the normalized remote
    state. ``prior`` is the last state the host persisted, used to work out what
    an update removed. ``id`` is None when the resource does not exist.
    """

    def __init__(
        self,
        id: t.Optional[str] = None,  # pylint: disable=W0622
        state: t.Optional[t.Dict] = None,
        prior: t.Optional[t.Dict] = None,
    ):
        self.id = id
        self.state = DotMap(state or {})
        self.prior = DotMap(prior or {})

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(id={self.id!r})'

    @property
    def exists(self) -> bool:
        """Whether the resource currently has an identity"""
        return self.id is not None

    @staticmethod
    def _walk(source: DotMap, key: str) -> t.Any:
        node = source
        for part in key.split('.'):
            if isinstance(node, list) and len(node) == 1:
                # single-element list form of a nested block
                node = node[0]
            if not isinstance(node, dict) or part not in node:
                return MISSING
            node = node[part]
        return node

    def get(self, key: str, default: t.Any = None) -> t.Any:
        """
        Return a plain copy of dotted ``key`` from the working state.

        Nested blocks may be a mapping or a single-element list holding one,
        so ``template.alias`` resolves for both ``{'template': {...}}`` and
        ``{'template': [{...}]}``.
        """
        node = self._walk(self.state, key)
        return default if node is MISSING else plain(node)

    def get_prior(self, key: str, default: t.Any = None) -> t.Any:
        """Return a plain copy of dotted ``key`` from the prior state"""
        node = self._walk(self.prior, key)
        return default if node is MISSING else plain(node)

    def is_list(self, key: str) -> bool:
        """Whether dotted ``key`` of the working state holds a list"""
        return isinstance(self._walk(self.state, key), list)

    def set_id(self, value: t.Optional[str]) -> None:
        """Bind (or clear, with None) the identity of the resource"""
        if value is None and self.id is not None:
            debug.lv3(f'Clearing identity "{self.id}"')
        self.id = value

    def update_state(self, value: t.Dict) -> None:
        """Replace the working state with ``value``"""
        self.state = DotMap(value)
        debug.lv5(f'Updated state: {prettystr(self.state.toDict())}')

    def to_dict(self) -> t.Dict[str, t.Any]:
        """The id and state for the host to persist"""
        return {'id': self.id, 'state': self.state.toDict()}
