"""Intent actions -- keyword-matched handlers over the market data client.

DEXSCREENER_ACTIONS is ordered: the plugin routes a message to the first
action whose predicate accepts it.
"""

from dexscreener_plugin.actions.base import Action, ActionResult, Message, message_text
from dexscreener_plugin.actions.boosted import boosted_tokens_action
from dexscreener_plugin.actions.chain_pairs import chain_pairs_action
from dexscreener_plugin.actions.new_pairs import new_pairs_action
from dexscreener_plugin.actions.profiles import token_profiles_action
from dexscreener_plugin.actions.search import search_action
from dexscreener_plugin.actions.token_info import token_info_action
from dexscreener_plugin.actions.trending import trending_action

DEXSCREENER_ACTIONS: list[Action] = [
    search_action,
    token_info_action,
    trending_action,
    new_pairs_action,
    chain_pairs_action,
    boosted_tokens_action,
    token_profiles_action,
]

__all__ = [
    "DEXSCREENER_ACTIONS",
    "Action",
    "ActionResult",
    "Message",
    "boosted_tokens_action",
    "chain_pairs_action",
    "message_text",
    "new_pairs_action",
    "search_action",
    "token_info_action",
    "token_profiles_action",
    "trending_action",
]
