SYSTEM_PROMPT = (
    "You are a highly qualified playwrighter for kids' plays writing training data "
    "for a large language model."
)

_SYSTEM_TURN = (
    '{"role": "system", "content": "A conversation between a user and a helpful assistant. '
    "Taking the role as a play writer assistant for a kids' play.\"}"
)
_USER_TURN = '{"role": "user", "content": "generate a script about The Wise Owl"}'
_ASSISTANT_TURN = (
    '{"role": "assistant", "content": "<center>Act One</center>\\n\\n<center>Scene 1</center>\\n\\n'
    "<stage>A moonlit forest clearing. Night time. An ancient oak tree dominates the center.</stage>\\n\\n"
    "<center>PROFESSOR FINCH</center>\\n\\n"
    "<dialog>I've been searching these woods for hours. The rare night owl must be somewhere!</dialog>\\n\\n"
    "<center>OWL</center>\\n\\n"
    "<dialog>Perhaps what you seek has been watching you all along.</dialog>\\n\\n"
    "<stage>PROFESSOR FINCH jumps, startled, and looks up to see OWL perched on a branch above.</stage>\\n\\n"
    "<center>PROFESSOR FINCH</center>\\n\\n"
    "<dialog>Magnificent! A Tawny Owl with the ability to speak!</dialog>\\n\\n"
    "<center>OWL</center>\\n\\n"
    '<dialog>All creatures speak. Few humans listen.</dialog>"}'
)
_EXAMPLE = f"[{_SYSTEM_TURN}, {_USER_TURN}, {_ASSISTANT_TURN}]"

# literal JSON goes in through fields so its braces never meet str.format
QUERY_TEMPLATE = """
Your task is to generate JSONL data that generates a variety of play scripts using different children-friendly characters.
Each script should be formatted in a way that is suitable for children, with clear dialogues and stage directions.

You only respond with one single JSONL response.
Always start with the same system prompt: {system_turn}
Vary the character in the user request: {user_turn}
Generate a new script for each request, ensuring it is suitable for children.:  {assistant_turn}]

Only generate ONE system prompt, ONE user request, and ONE assistant response in the JSONL format.

Use the tools provided to vary the characters and themes of the plays.

Example:
{example}

Request from the operator:
{query}

JSONL format:
"""


def build_query_prompt(query: str) -> str:
    return QUERY_TEMPLATE.format(
        system_turn=_SYSTEM_TURN,
        user_turn=_USER_TURN,
        assistant_turn=_ASSISTANT_TURN,
        example=_EXAMPLE,
        query=query,
    )
