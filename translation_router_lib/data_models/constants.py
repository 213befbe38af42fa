TEXTS_PARAM = "texts"
SOURCE_LANG_PARAM = "sourceLang"
TARGET_LANG_PARAM = "targetLang"

TRANSLATE_REQ = [TEXTS_PARAM, SOURCE_LANG_PARAM, TARGET_LANG_PARAM]

# Downstream batch protocol
CHUNKS_PARAM = "chunks"
TRANSLATOR_TARGET_LANG_PARAM = "target_lang"

# Warmup events
WARMUP_SOURCE = "warmup"
WARMUP_SOURCE_PARAM = "source"
WARMUP_CONCURRENCY_PARAM = "concurrency"

WARMUP_REQ = [WARMUP_SOURCE_PARAM]
WARMUP_OPT = [WARMUP_CONCURRENCY_PARAM]
