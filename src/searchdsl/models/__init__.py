from .collection import KeyedCollection as KeyedCollection
from .highlight import Highlight as Highlight
from .inner_hit import (
    NestedInnerHit as NestedInnerHit,
    ParentInnerHit as ParentInnerHit,
)
from .mixins import ParametersMixin as ParametersMixin
from .protocols import (
    NamedRenderableProtocol as NamedRenderableProtocol,
    RenderableProtocol as RenderableProtocol,
)
from .suggest import Suggest as Suggest
