"""Keyword-matched mood and style profiles.

A concept is scored against every profile's keyword list; the best match wins
and the first entry of each table is the catch-all fallback. Every visual and
audio descriptor of a blueprint is read from exactly one mood profile and one
style profile, which is what keeps the four scenes consistent with each other.

Four-element tuples are indexed by act: setup, escalation, climax, resolution.
"""
from __future__ import annotations

from dataclasses import dataclass

Act4 = tuple[str, str, str, str]


@dataclass(frozen=True)
class MoodProfile:
    name: str
    keywords: tuple[str, ...]
    beats: Act4         # scene title phrases
    lighting: Act4
    palette: Act4
    atmosphere: Act4
    pace: str           # appended to camera movement
    climax: str         # fallback stakes when the concept states no purpose
    resolution: str
    voice: str          # narration delivery
    tempo: str
    instruments: str
    sound_arc: Act4
    tags: tuple[str, ...]


@dataclass(frozen=True)
class StyleProfile:
    name: str
    keywords: tuple[str, ...]
    hero: str           # protagonist when the concept names none
    default_setting: str
    default_action: str  # gerund phrase
    setting_details: Act4
    props: Act4
    accent: str
    texture: str
    counterpart: str    # second voice in the dialogue beat
    tags: tuple[str, ...]


MOODS: tuple[MoodProfile, ...] = (
    MoodProfile(
        name="hopeful",
        keywords=(),  # default / catch-all
        beats=("First Light", "Against the Current", "The Leap", "A New Horizon"),
        lighting=(
            "Soft early-morning daylight with gentle falloff",
            "Clear midday light broken by passing cloud shadow",
            "Strong warm backlight flaring through the frame",
            "Golden-hour glow wrapping every surface",
        ),
        palette=(
            "pale gold and soft sky blue",
            "muted teal and warm sand",
            "saturated amber against deep blue",
            "honey gold and rose",
        ),
        atmosphere=(
            "quiet anticipation",
            "determined, with a hint of doubt",
            "breathless and charged",
            "warm, earned relief",
        ),
        pace="steady and deliberate",
        climax="everything hanging on a single choice",
        resolution="a small, certain smile as the world opens up",
        voice="warm, grounded and quietly encouraging",
        tempo="80-95 BPM",
        instruments="felt piano, warm strings and a soft pulse of acoustic guitar",
        sound_arc=(
            "sparse piano motif over room tone",
            "strings enter and the pulse quickens",
            "full ensemble swells to a bright peak",
            "melody returns solo, resolved on a major chord",
        ),
        tags=("hopeful", "uplifting"),
    ),
    MoodProfile(
        name="melancholic",
        keywords=(
            "remember", "memory", "lost", "lone", "lonely", "alone", "forgotten",
            "farewell", "goodbye", "grief", "abandoned", "empty", "fading",
            "missing", "home", "last", "earth", "rain", "old",
        ),
        beats=("Echoes of Home", "Fragile Progress", "What Must Be Kept", "What Remains"),
        lighting=(
            "Dim, cool blue ambient light with long soft shadows",
            "Overcast diffuse light, desaturated and cold",
            "A single hard shaft of pale light cutting through blue darkness",
            "Low blue-hour glow with one faint warm practical",
        ),
        palette=(
            "desaturated slate blue and ash grey",
            "faded teal and dusty umber",
            "cold steel blue with a lone ember of warm amber",
            "muted indigo and soft pewter",
        ),
        atmosphere=(
            "hushed and wistful",
            "fragile, tinged with longing",
            "aching, bittersweet release",
            "still and reflective",
        ),
        pace="slow and lingering",
        climax="every memory surfacing at once",
        resolution="a quiet peace settling where the grief used to be",
        voice="soft, unhurried and reflective",
        tempo="60-70 BPM",
        instruments="solo cello, sparse felt piano and distant ambient pads",
        sound_arc=(
            "lone cello note under wind and room tone",
            "piano answers the cello, slightly out of step",
            "strings rise into an aching unresolved chord",
            "piano alone, fading into silence",
        ),
        tags=("melancholy", "bittersweet"),
    ),
    MoodProfile(
        name="ominous",
        keywords=(
            "storm", "midnight", "dark", "darkness", "shadow", "haunted", "ghost",
            "fear", "monster", "night", "curse", "thunder", "abyss", "hunt",
            "hunted", "blood", "whisper", "awakening",
        ),
        beats=("The Calm Before", "Gathering Dark", "The Storm Breaks", "Aftermath"),
        lighting=(
            "Low-key moonlight with deep crushed shadows",
            "Intermittent flashes of lightning against near-darkness",
            "Violent strobing lightning and harsh hard-edged rim light",
            "Thin grey dawn light seeping through lingering mist",
        ),
        palette=(
            "midnight blue and charcoal",
            "storm grey with sickly green undertones",
            "electric white against ink black",
            "washed-out grey and pale silver",
        ),
        atmosphere=(
            "uneasy stillness",
            "creeping dread",
            "chaotic and overwhelming",
            "exhausted, eerie calm",
        ),
        pace="tense, with sudden jolts",
        climax="the danger finally showing its full shape",
        resolution="the silence afterwards heavier than the storm",
        voice="low, measured and foreboding",
        tempo="70 BPM building to 120 BPM",
        instruments="low drones, bowed metal, taiko hits and a distant choir",
        sound_arc=(
            "sub-bass drone beneath rain and wind",
            "irregular percussion and rising dissonant strings",
            "full percussion and choir crashing with thunder",
            "drone thins out to a single sustained tone",
        ),
        tags=("suspense", "dark"),
    ),
    MoodProfile(
        name="whimsical",
        keywords=(
            "origami", "paper", "crane", "magic", "magical", "toy", "dream",
            "fairy", "candy", "balloon", "cat", "playful", "tiny", "bubble",
            "circus", "puppet", "wish", "kite",
        ),
        beats=("Once Upon a Moment", "Curiouser and Curiouser", "The Marvel Unfolds", "Happily, For Now"),
        lighting=(
            "Soft pastel daylight with a gentle bloom",
            "Dappled light flickering through moving shapes",
            "Sparkling practical lights and a glowing magical key light",
            "Warm lantern glow with twinkling highlights",
        ),
        palette=(
            "pastel peach and mint",
            "lavender and buttercup yellow",
            "iridescent pink, teal and gold",
            "cream, coral and soft sky blue",
        ),
        atmosphere=(
            "curious and playful",
            "mischievous and bouncy",
            "dazzling wonder",
            "cozy delight",
        ),
        pace="light and bouncy",
        climax="the impossible suddenly becoming real",
        resolution="a grin that says it might all happen again tomorrow",
        voice="playful, bright and storybook-like",
        tempo="100-115 BPM",
        instruments="pizzicato strings, celesta, glockenspiel and light woodwinds",
        sound_arc=(
            "tinkling celesta motif",
            "pizzicato strings skip in with woodwind flourishes",
            "full playful orchestra with a sparkling glissando",
            "music-box reprise of the opening motif",
        ),
        tags=("whimsical", "storytime"),
    ),
    MoodProfile(
        name="electric",
        keywords=(
            "dance", "dancer", "street", "hack", "hacker", "rebel", "race",
            "battle", "fight", "city", "neon", "billboard", "graffiti", "rave",
            "protest", "chase", "skate", "crowd",
        ),
        beats=("The Crew Assembles", "Turning Up the Heat", "Takeover", "The City Answers"),
        lighting=(
            "Cool streetlight mixed with flickering neon signage",
            "Pulsing colored light from screens and signs",
            "Hard strobing projector beams and saturated color washes",
            "Neon glow softening into first light",
        ),
        palette=(
            "cyan and magenta over wet asphalt black",
            "hot pink, electric blue and sodium orange",
            "blown-out neon spectrum against deep black",
            "magenta fading into dawn lilac",
        ),
        atmosphere=(
            "restless and buzzing",
            "rebellious momentum",
            "euphoric, explosive energy",
            "triumphant afterglow",
        ),
        pace="punchy and rhythmic, cut to the beat",
        climax="the whole crowd locking into the same rhythm",
        resolution="breathless laughter as the echoes fade",
        voice="confident, rhythmic and streetwise",
        tempo="120-128 BPM",
        instruments="punchy drum machines, sub-bass, vocal chops and synth stabs",
        sound_arc=(
            "filtered beat muffled as if from a distance",
            "filter opens, bass line drops in",
            "full drop with layered synths and crowd noise",
            "beat strips back to a lone synth pad",
        ),
        tags=("energy", "hype"),
    ),
    MoodProfile(
        name="serene",
        keywords=(
            "garden", "ocean", "sea", "forest", "calm", "tea", "meditation",
            "river", "meadow", "bloom", "flower", "lake", "quiet", "peace",
            "zen", "breeze",
        ),
        beats=("Stillness", "Tending", "Full Bloom", "Harmony"),
        lighting=(
            "Soft diffused morning light",
            "Gentle dappled sunlight through leaves",
            "Radiant warm sunlight at its fullest",
            "Calm golden dusk with long gentle shadows",
        ),
        palette=(
            "sage green and soft ivory",
            "moss green and warm earth brown",
            "vibrant leaf green and sunlit gold",
            "dusky rose and muted olive",
        ),
        atmosphere=(
            "tranquil and unhurried",
            "patient and attentive",
            "quietly radiant",
            "harmonious and content",
        ),
        pace="gentle and flowing",
        climax="patience finally paying off",
        resolution="a long, contented breath",
        voice="calm, gentle and close to the microphone",
        tempo="65-80 BPM",
        instruments="acoustic guitar, soft flute and natural field recordings",
        sound_arc=(
            "birdsong and a single guitar phrase",
            "flute joins with a slow melodic line",
            "warm ensemble swell with soft percussion",
            "return to birdsong and a sustained chord",
        ),
        tags=("calm", "peaceful"),
    ),
    MoodProfile(
        name="awestruck",
        keywords=(
            "star", "constellation", "galaxy", "cosmos", "cosmic", "planetarium",
            "universe", "sky", "aurora", "infinite", "comet", "nebula",
            "mountain", "eclipse", "heaven",
        ),
        beats=("A Sky Unwritten", "Mapping the Dark", "The Heavens Ignite", "Among the Stars"),
        lighting=(
            "Deep darkness pricked by faint starlight",
            "Cool projected starlight sweeping across surfaces",
            "Brilliant cascading light blooming from above",
            "Soft silver starlight with a warm glow at center",
        ),
        palette=(
            "ink navy and faint silver",
            "deep violet and cool cyan",
            "radiant white gold against cosmic violet",
            "midnight blue and warm starlight gold",
        ),
        atmosphere=(
            "hushed reverence",
            "growing fascination",
            "overwhelming awe",
            "serene wonder",
        ),
        pace="slow and majestic",
        climax="the full scale of it revealed at once",
        resolution="a small figure dwarfed by something beautiful",
        voice="hushed, reverent and expansive",
        tempo="60-72 BPM",
        instruments="ethereal synth pads, choir, harp and slow orchestral swells",
        sound_arc=(
            "faint shimmering pad in near silence",
            "harp arpeggios join a rising choir",
            "full orchestral and choral crescendo",
            "shimmering pad returns under a single harp note",
        ),
        tags=("awe", "wonder"),
    ),
)


STYLES: tuple[StyleProfile, ...] = (
    StyleProfile(
        name="grounded cinematic drama",
        keywords=(),  # default / catch-all
        hero="the protagonist",
        default_setting="a lived-in corner of the everyday world",
        default_action="chasing the one thing that matters most",
        setting_details=(
            "ordinary details hinting at a larger story",
            "familiar spaces that suddenly feel tighter",
            "the world narrowed down to one decisive place",
            "the same space, subtly changed",
        ),
        props=(
            "a worn personal keepsake",
            "a note that changes the plan",
            "the object everything depends on",
            "the keepsake, now in a new place",
        ),
        accent="warm skin-tone",
        texture="naturalistic 35mm film look, shallow depth of field, fine grain",
        counterpart="A Friend",
        tags=("shortfilm", "cinematic"),
    ),
    StyleProfile(
        name="cinematic sci-fi",
        keywords=(
            "astronaut", "mars", "space", "planet", "robot", "alien", "rocket",
            "spaceship", "future", "futuristic", "cyber", "android", "orbit",
            "station", "moon", "colony", "galaxy",
        ),
        hero="the lone explorer",
        default_setting="a remote frontier outpost",
        default_action="pushing past the edge of the known",
        setting_details=(
            "dust drifting across an endless alien horizon",
            "cramped habitat interiors lit by status panels",
            "the exposed surface, dwarfed by the sky",
            "the horizon again, now marked by human presence",
        ),
        props=(
            "a scuffed helmet visor",
            "flickering life-support readouts",
            "a fragile sign of life",
            "a small flag of something living",
        ),
        accent="rust-orange",
        texture="anamorphic widescreen, photoreal detail, fine film grain",
        counterpart="Mission Control",
        tags=("scifi", "space"),
    ),
    StyleProfile(
        name="neon-lit urban music video",
        keywords=(
            "street", "city", "billboard", "dancer", "dance", "neon", "graffiti",
            "subway", "skyline", "rooftop", "hack", "hacker", "projection",
            "club", "downtown", "alley",
        ),
        hero="the crew",
        default_setting="a rain-slick downtown grid",
        default_action="taking over the city for one night",
        setting_details=(
            "wet asphalt reflecting every sign",
            "alleyways and rooftops wired with improvised gear",
            "towering billboards over a packed intersection",
            "the emptied streets at the edge of dawn",
        ),
        props=(
            "a battered portable projector",
            "tangled cables and a laptop glowing in the dark",
            "billboards flipping to the crew's own images",
            "spray-painted crew tag on a shuttered wall",
        ),
        accent="acid-green",
        texture="handheld music-video energy, high contrast, anamorphic flares",
        counterpart="The Lookout",
        tags=("streetculture", "musicvideo"),
    ),
    StyleProfile(
        name="moody coastal gothic",
        keywords=(
            "lighthouse", "sea", "ocean", "storm", "ship", "harbor", "wave",
            "cliff", "shore", "island", "fog", "keeper", "coast", "tide",
        ),
        hero="the keeper",
        default_setting="a rugged stretch of storm-battered coastline",
        default_action="standing watch against the sea",
        setting_details=(
            "jagged rocks and a churning grey sea",
            "spiral stairwells and salt-crusted windows",
            "the exposed summit, lashed by wind and spray",
            "the shoreline strewn with wreckage and calm water",
        ),
        props=(
            "a rusted iron door",
            "a cracked brass lantern housing",
            "the great lens blazing to life",
            "a lone gull on the railing",
        ),
        accent="sodium-yellow",
        texture="gothic chiaroscuro, heavy atmosphere, practical rain and fog",
        counterpart="A Voice on the Radio",
        tags=("gothic", "coastal"),
    ),
    StyleProfile(
        name="luminous cosmic fantasy",
        keywords=(
            "constellation", "star", "galaxy", "planetarium", "cosmos", "nebula",
            "dragon", "wizard", "spell", "myth", "kingdom", "castle", "celestial",
        ),
        hero="the dreamer",
        default_setting="a vaulted chamber open to the night sky",
        default_action="bringing the heavens back to life",
        setting_details=(
            "a domed ceiling of dimmed and missing stars",
            "scaffolding and tools beneath half-restored skies",
            "the dome fully awakened with swirling light",
            "the quiet chamber under a complete sky",
        ),
        props=(
            "faded star charts",
            "a brush loaded with glowing pigment",
            "a constellation blazing into shape",
            "a single star left for someone else to finish",
        ),
        accent="starlight-gold",
        texture="painterly light, volumetric glow, soft particle effects",
        counterpart="An Apprentice",
        tags=("fantasy", "stars"),
    ),
    StyleProfile(
        name="painterly magical realism",
        keywords=(
            "time", "traveler", "traveller", "origami", "memory", "dream",
            "clock", "letter", "crane", "magic", "paper", "past", "century",
        ),
        hero="the wanderer",
        default_setting="a quiet room where past and present overlap",
        default_action="stitching moments across time",
        setting_details=(
            "sunlit dust suspended as if time has paused",
            "two eras bleeding into one another at the edges",
            "time itself folding open around them",
            "the room settled back into a single moment",
        ),
        props=(
            "a stack of folded paper",
            "a ticking pocket watch",
            "a flock of glowing paper shapes in flight",
            "one paper crane resting on a windowsill",
        ),
        accent="vintage-sepia",
        texture="soft-focus painterly grade, halation, gentle film grain",
        counterpart="A Voice from Another Time",
        tags=("magicalrealism", "timetravel"),
    ),
    StyleProfile(
        name="intimate arthouse drama",
        keywords=(
            "painter", "painting", "artist", "canvas", "studio", "sculptor",
            "musician", "piano", "family", "elder", "grandmother", "grandfather",
            "craft", "workshop",
        ),
        hero="the artist",
        default_setting="a cluttered, light-filled studio",
        default_action="finishing the work of a lifetime",
        setting_details=(
            "half-finished work leaning against every wall",
            "tools and materials spread in purposeful chaos",
            "the single piece that matters, centered in the room",
            "the studio tidied, the work finally complete",
        ),
        props=(
            "paint-stained hands",
            "a palette of mixed colors",
            "the final brushstroke",
            "the finished piece catching the light",
        ),
        accent="ochre",
        texture="intimate handheld close-ups, natural window light, 16mm texture",
        counterpart="A Former Student",
        tags=("arthouse", "artistlife"),
    ),
)
