# Default maximum tokens per batch, sized for the translator services' memory
DEFAULT_MAX_TOKENS = 3000

# Default maximum items per batch for the count‑based policy
DEFAULT_MAX_ITEMS = 50

# Approximate number of characters per token for Latin scripts
DEFAULT_CHARS_PER_TOKEN = 4

# Delay observed after a warmup fan‑out so that sibling instances overlap
WARMUP_DELAY_SECONDS = 0.075


class ChunkingStrategies:
    TOKENS = "tokens"
    COUNT = "count"


POSSIBLE_CHUNKING_STRATEGIES = [
    ChunkingStrategies.TOKENS,
    ChunkingStrategies.COUNT,
]


class Hubs:
    EN = "en"
    DE = "de"


# Order matters: it is the pivot preference when several hubs qualify
HUB_LANGUAGES = (Hubs.EN, Hubs.DE)


class Families:
    ROMANCE = "romance"
    EN = "en"
    DE = "de"


# Languages served by the opus-mt ROMANCE <-> en translators
ROMANCE_LANGUAGES = frozenset(
    [
        # Spanish variants
        "es",
        "es_AR",
        "es_CL",
        "es_CO",
        "es_CR",
        "es_DO",
        "es_EC",
        "es_ES",
        "es_GT",
        "es_HN",
        "es_MX",
        "es_NI",
        "es_PA",
        "es_PE",
        "es_PR",
        "es_SV",
        "es_UY",
        "es_VE",
        # French variants
        "fr",
        "fr_BE",
        "fr_CA",
        "fr_FR",
        "wa",  # Walloon
        "frp",  # Franco-Provençal
        "oc",  # Occitan
        # Italian variants
        "it",
        "co",  # Corsican
        "nap",  # Neapolitan
        "scn",  # Sicilian
        "vec",  # Venetian
        # Portuguese variants
        "pt",
        "pt_BR",
        "pt_PT",
        "gl",  # Galician
        "mwl",  # Mirandese
        # Catalan and related
        "ca",
        "an",  # Aragonese
        "lad",  # Ladino
        # Romanian
        "ro",
        # Other Romance
        "la",  # Latin
        "rm",  # Romansh
        "lld",  # Ladin
        "fur",  # Friulian
        "lij",  # Ligurian
        "lmo",  # Lombard
        "sc",  # Sardinian
    ]
)


class Services:
    """Identifiers of the translator services (without the deployment prefix)."""

    ROMANCE_EN = "translator-romance-en"
    EN_ROMANCE = "translator-en-romance"
    DE_EN = "translator-de-en"
    EN_DE = "translator-en-de"


# (from family, to family) -> service; the only direct edges of the graph
SERVICE_EDGES = {
    (Families.ROMANCE, Families.EN): Services.ROMANCE_EN,
    (Families.EN, Families.ROMANCE): Services.EN_ROMANCE,
    (Families.DE, Families.EN): Services.DE_EN,
    (Families.EN, Families.DE): Services.EN_DE,
}
