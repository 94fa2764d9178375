"""Query aggregation – answers, keys, registry, reductions and the bus."""
from askbus.application.query.answers import Answerer, BoolAnswer, VoteAnswer, zero_value
from askbus.application.query.bound import ContextQueries
from askbus.application.query.bus import QueryBus
from askbus.application.query.decorators import bool_answerer, number_answerer, vote_answerer
from askbus.application.query.keys import Aggregation, Family, QueryKey
from askbus.application.query.numeric import FLOAT, INT, NumericKind
from askbus.application.query.registry import QueryRegistry, SubscriberCollection, Subscription, answerer_identity

__all__ = [
    "FLOAT",
    "INT",
    "Aggregation",
    "Answerer",
    "BoolAnswer",
    "ContextQueries",
    "Family",
    "NumericKind",
    "QueryBus",
    "QueryKey",
    "QueryRegistry",
    "SubscriberCollection",
    "Subscription",
    "VoteAnswer",
    "answerer_identity",
    "bool_answerer",
    "number_answerer",
    "vote_answerer",
    "zero_value",
]
