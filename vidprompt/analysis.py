"""Concept analysis: who, what, where and why, plus mood and style.

Template-based, no language model: the concept's first sentence is split into
a subject phrase and connector-led clauses ("on Mars", "to remember Earth",
"during a midnight storm"), and keyword overlap picks a mood and style profile.
"""
from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass

from .config import TITLE_ACTION_WORDS
from .profiles import MOODS, STYLES, MoodProfile, StyleProfile

MAX_SUBJECT_WORDS = 4
MAX_PHRASE_WORDS = 5
MAX_LOGLINE_WORDS = 40

ARTICLES = {"a", "an", "the"}
DETERMINERS = {
    "my", "our", "your", "his", "her", "their", "its", "this", "these", "those",
    "some", "one", "two", "three", "four", "five", "several", "many", "every",
}
# Words kept lowercase inside titles
SMALL_WORDS = ARTICLES | {
    "and", "or", "but", "nor", "of", "to", "in", "on", "at", "by", "for",
    "with", "from", "into", "onto", "over", "as", "inside", "through", "during",
}
LOCATION_WORDS = {
    "on", "in", "inside", "at", "beneath", "under", "across", "above", "within",
    "aboard", "atop", "near", "into", "onto", "over", "along", "around", "among",
}
BACKDROP_WORDS = {"during", "while", "as", "when", "after", "before", "until"}
INSTRUMENT_WORDS = {"through", "with", "by", "via"}
RELATIVE_WORDS = {"who", "that", "which"}
CONJUNCTIONS = {"and", "or", "&"}
AUXILIARIES = {
    "is", "are", "was", "were", "be", "been", "has", "have", "had", "can",
    "will", "must", "could", "would", "should", "may", "might", "does", "do",
}
CLAUSE_WORDS = LOCATION_WORDS | BACKDROP_WORDS | INSTRUMENT_WORDS | RELATIVE_WORDS | {"to", "because", "so"}
# -ing words that are usually nouns
NOT_GERUNDS = {
    "thing", "king", "ring", "wing", "sing", "bring", "sting", "swing", "spring",
    "string", "morning", "evening", "ceiling", "wedding", "clothing", "ending",
    "building", "painting", "sibling", "darling", "pudding", "nothing",
    "something", "everything", "anything", "lightning", "offspring",
}
_PUNCT = ".,;:!?\"()[]{}"
_VOWELS = set("aeiou")

# "make a video about X" -> "X"
_REQUEST_PREFIX = re.compile(
    r"^(make|create|generate|build|produce|write)\s+(me\s+)?(a\s+|an\s+)?([\w\s-]*?\s+)?"
    r"(video|short|clip|film|movie|trailer|reel)\s+(about|on|for|of|where|in which)\s+",
    flags=re.IGNORECASE,
)


@dataclass(frozen=True)
class ConceptAnalysis:
    """Everything later stages need to know about one concept."""
    concept: str            # cleaned concept text
    seed: int               # stable digest-derived integer for variant picks
    protagonist: str        # "the lone astronaut"
    action: str             # gerund phrase, "" when none found
    setting: str            # "" when none found
    backdrop: str           # "during a midnight storm"
    purpose: str            # "remember Earth"
    motifs: tuple[str, ...]  # concrete nouns pulled from the concept
    keywords: frozenset[str]
    mood: MoodProfile
    style: StyleProfile
    title: str
    one_liner: str

    @property
    def action_or_default(self) -> str:
        return self.action or self.style.default_action

    @property
    def place(self) -> str:
        """Where the story happens, including its time or weather backdrop."""
        base = self.setting or self.style.default_setting
        return f"{base} {self.backdrop}" if self.backdrop else base

    def pick(self, options: tuple[str, ...] | list[str], salt: int = 0) -> str:
        """Deterministically choose one option for this concept."""
        return options[(self.seed >> (salt * 3)) % len(options)]


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------

def clean_concept(idea: str) -> str:
    """Collapse whitespace and drop a leading "make a video about" request."""
    collapsed = " ".join(idea.split())
    stripped = _REQUEST_PREFIX.sub("", collapsed).strip()
    return stripped or collapsed


def _token(word: str) -> str:
    return word.strip(_PUNCT)


def _bare(word: str) -> str:
    return _token(word).strip("'").lower()


def fold(word: str) -> str:
    """Naive singular form used for keyword matching."""
    w = word.lower()
    if w.endswith("'s"):
        w = w[:-2]
    if len(w) > 4 and w.endswith("ies"):
        return w[:-3] + "y"
    if len(w) > 3 and w.endswith("s") and not w.endswith("ss"):
        return w[:-1]
    return w


def keywords_of(text: str) -> frozenset[str]:
    return frozenset(fold(w) for w in re.findall(r"[\w']+", text.lower()))


def is_gerund(word: str) -> bool:
    w = _bare(word)
    return len(w) > 4 and w.endswith("ing") and w not in NOT_GERUNDS


def to_gerund(word: str) -> str:
    """"steals" -> "stealing", "flies" -> "flying", "run" -> "running"."""
    w = _bare(word)
    if not w or is_gerund(w):
        return w
    if w.endswith("ies") and len(w) > 4:
        w = w[:-3] + "y"
    elif w.endswith(("ses", "xes", "ches", "shes", "zes")):
        w = w[:-2]
    elif w.endswith("s") and not w.endswith("ss") and len(w) > 2:
        w = w[:-1]
    if w.endswith("ie"):
        return w[:-2] + "ying"
    if w.endswith("e") and not w.endswith("ee") and len(w) > 2:
        return w[:-1] + "ing"
    if (
        len(w) <= 4 and len(w) >= 3
        and w[-1] not in _VOWELS | {"w", "x", "y"}
        and w[-2] in _VOWELS
        and w[-3] not in _VOWELS
    ):
        return w + w[-1] + "ing"
    return w + "ing"


def title_case(words: list[str]) -> str:
    out = []
    for i, word in enumerate(words):
        if i > 0 and word.lower() in SMALL_WORDS:
            out.append(word.lower())
        elif word[:1].islower():
            out.append(word[:1].upper() + word[1:])
        else:
            out.append(word)
    return " ".join(out)


def _trim_small(words: list[str]) -> list[str]:
    """Drop dangling small words at the end of a truncated phrase."""
    words = list(words)
    while words and words[-1].lower() in SMALL_WORDS:
        words.pop()
    return words


def _phrase(words: list[str], limit: int = MAX_PHRASE_WORDS) -> str:
    return " ".join(_trim_small(words[:limit]))


def _first_sentence(text: str) -> str:
    return re.split(r"(?<=[.!?])\s+", text, maxsplit=1)[0]


# ---------------------------------------------------------------------------
# Sentence structure
# ---------------------------------------------------------------------------

def _split_subject(words: list[str]) -> tuple[list[str], str, list[str]]:
    """Split leading words into (subject words, lead determiner, rest)."""
    lead = ""
    i = 0
    if words and (_bare(words[0]) in ARTICLES or _bare(words[0]) in DETERMINERS):
        lead = _bare(words[0])
        i = 1

    subject: list[str] = []
    while i < len(words) and len(subject) < MAX_SUBJECT_WORDS:
        word = words[i]
        bare = _bare(word)
        if not bare:
            i += 1
            continue
        if is_gerund(bare) or bare in CLAUSE_WORDS:
            break
        if bare in ARTICLES and subject:
            if subject[-1].lower() in CONJUNCTIONS:
                subject.append(_token(word))
                i += 1
                continue
            # "a cat steals the moon": the word before the article is the verb
            if len(subject) > 1:
                subject.pop()
                i -= 1
            break
        subject.append(_token(word))
        i += 1
        if word.endswith((",", ";", ":")):
            break
    return _trim_small(subject), lead, words[i:]


def _segments(words: list[str]) -> list[tuple[str, list[str]]]:
    """Group words into (connector, phrase) clauses; the first connector is ""."""
    segments: list[tuple[str, list[str]]] = [("", [])]
    for word in words:
        bare = _bare(word)
        connector, phrase = segments[-1]
        if bare in CLAUSE_WORDS:
            if phrase:
                segments.append((bare, []))
            else:
                segments[-1] = (bare, phrase)
        elif bare:
            phrase.append(_token(word))
        if word.endswith((",", ";", ":")) and segments[-1][1]:
            segments.append((",", []))
    return [(c, p) for c, p in segments if p]


def _strip_lead(words: list[str]) -> list[str]:
    if words and words[0].lower() in ARTICLES:
        return words[1:]
    return words


def _protagonist(subject: list[str], lead: str, style: StyleProfile) -> str:
    if not subject:
        return style.hero
    text = " ".join(subject)
    if lead in DETERMINERS:
        return f"{lead} {text}"
    if lead in ARTICLES:
        return f"the {text}"
    plural = fold(subject[-1]) != subject[-1].lower()
    if all(w[:1].isupper() for w in subject) and not plural and len(subject) <= 2:
        return text  # a name
    return f"the {text[:1].lower()}{text[1:]}"


def _match(profiles, keywords: frozenset[str]):
    """Best keyword overlap; ties keep table order, no hit falls back to entry 0."""
    best, best_score = profiles[0], 0
    for profile in profiles[1:]:
        score = sum(1 for kw in profile.keywords if fold(kw) in keywords)
        if score > best_score:
            best, best_score = profile, score
    return best


def _make_title(subject: list[str], lead: str, action_words: list[str], concept: str) -> str:
    action_title = title_case(_trim_small(action_words[:TITLE_ACTION_WORDS]))
    if subject:
        head = title_case(subject)
        if lead in ARTICLES or (lead == "" and subject[-1][:1].islower()):
            head = f"The {head}"
        elif lead:
            head = f"{lead.capitalize()} {head}"
        return f"{head}: {action_title}" if action_title else head
    if action_title:
        return action_title
    fallback = _trim_small([_token(w) for w in concept.split() if _bare(w)][:MAX_PHRASE_WORDS])
    return title_case(fallback) if fallback else "Untitled Vision"


def _one_liner(sentence: str, mood: MoodProfile, style: StyleProfile) -> str:
    words = sentence.split()
    if len(words) > MAX_LOGLINE_WORDS:
        words = words[:MAX_LOGLINE_WORDS]
        words[-1] = words[-1].rstrip(_PUNCT) + "..."
    body = " ".join(words).strip()
    first = _bare(words[0]) if words else ""
    if first in ARTICLES or first in DETERMINERS:
        body = body[:1].lower() + body[1:]
    if not body.endswith((".", "!", "?", "...")):
        body += "."
    return f"In this {mood.name} {style.name} piece, {body}"


def analyze_concept(idea: str) -> ConceptAnalysis:
    """Analyze a non-empty concept. Total over any non-blank string."""
    concept = clean_concept(idea)
    seed = int(hashlib.sha256(concept.encode("utf-8")).hexdigest()[:12], 16)
    keywords = keywords_of(concept)
    mood = _match(MOODS, keywords)
    style = _match(STYLES, keywords)

    sentence = _first_sentence(concept)
    subject, lead, rest = _split_subject(sentence.split())
    protagonist = _protagonist(subject, lead, style)

    action_words: list[str] = []
    setting = backdrop = purpose = instrument = ""
    for connector, phrase in _segments(rest):
        if connector in ("", *RELATIVE_WORDS) and not action_words:
            action_words = phrase[:MAX_PHRASE_WORDS + 1]
        elif connector == "to":
            if phrase[0].lower() in ARTICLES | DETERMINERS:
                setting = setting or _phrase(phrase)
            else:
                purpose = purpose or _phrase(phrase)
        elif connector in LOCATION_WORDS and not setting:
            setting = _phrase(phrase)
        elif connector in BACKDROP_WORDS and not backdrop:
            backdrop = f"{connector} {_phrase(phrase)}"
        elif connector in INSTRUMENT_WORDS and not instrument:
            instrument = _phrase(phrase)

    while action_words and action_words[0].lower() in AUXILIARIES:
        action_words = action_words[1:]
    leftover = ""
    if action_words and (
        action_words[0].lower() in SMALL_WORDS | DETERMINERS or not action_words[0][:1].islower()
    ):
        # a noun phrase, not something the protagonist does
        leftover, action_words = " ".join(action_words), []
    if action_words:
        action_words = [to_gerund(action_words[0]), *action_words[1:]]
    action = _phrase(action_words, MAX_PHRASE_WORDS + 1)

    motifs: list[str] = []
    candidates = [
        " ".join(action_words[1:]),
        leftover,
        instrument,
        " ".join(purpose.split()[1:]),
        backdrop.split(" ", 1)[1] if backdrop else "",
        setting,
    ]
    for candidate in candidates:
        motif = _phrase(candidate.split(), MAX_SUBJECT_WORDS)
        if motif and motif.lower() not in {m.lower() for m in motifs}:
            motifs.append(motif)

    return ConceptAnalysis(
        concept=concept,
        seed=seed,
        protagonist=protagonist,
        action=action,
        setting=setting,
        backdrop=backdrop,
        purpose=purpose,
        motifs=tuple(motifs),
        keywords=keywords,
        mood=mood,
        style=style,
        title=_make_title(subject, lead, action_words, concept),
        one_liner=_one_liner(sentence, mood, style),
    )
