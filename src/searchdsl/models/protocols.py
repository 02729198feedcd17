from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class RenderableProtocol(Protocol):
    """
    Structural protocol for every building block of a search request.

    A class implicitly satisfies this protocol if it provides a `to_dict()`
    method returning the nested mapping the engine expects. Queries, sorts,
    highlights and every other part of a [`Search`][searchdsl.search.Search]
    are rendered through this single method, so the request never needs to know
    the internals of the parts it holds.

    ### Reference Implementations
    * [`BoolQuery`][searchdsl.models.query.BoolQuery]: Renders `{"bool": {...}}`.
    * [`MatchQuery`][searchdsl.models.query.MatchQuery]: Renders `{"match": {...}}`.
    * [`FieldSort`][searchdsl.models.sort.FieldSort]: Renders `{"<field>": {...}}`.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the object into an engine-compatible dictionary.
        """
        ...


@runtime_checkable
class NamedRenderableProtocol(RenderableProtocol, Protocol):
    """
    A renderable that is addressed by a name inside its parent mapping.

    Aggregations and inner hits are stored and rendered keyed by `name()`.
    """

    def name(self) -> str:
        """
        Returns the key identifying this object within its parent mapping.
        """
        ...
