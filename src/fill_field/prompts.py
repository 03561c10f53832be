from dataclasses import dataclass


@dataclass(frozen=True)
class Prompts:
    field_name: str
    system: str
    user: str


SUMMARIZE_PROMPTS = Prompts(
    field_name="synopsis",
    system="Respond in the first-person as if you are the author. Never refer to the blog post directly.",
    user=(
        "Re-write this as a single short concise paragraph, using an active voice. "
        "Be direct. Only cover the key points."
    ),
)

TAGLINE_PROMPTS = Prompts(
    field_name="tagline",
    system="Use the past tense",
    user="Write a tagline for this blog post. Answer with only the tagline. Answer in a single short sentence.",
)

PROMPTS_BY_KIND = {
    "synopsis": SUMMARIZE_PROMPTS,
    "tagline": TAGLINE_PROMPTS,
}
