"""Endpoint, model identifiers and role names for the Perplexity API."""

API_URL = "https://api.perplexity.ai/chat/completions"

# Sonar online models
MODEL_LLAMA_31_SONAR_SMALL_128K_ONLINE = "llama-3.1-sonar-small-128k-online"
MODEL_LLAMA_31_SONAR_LARGE_128K_ONLINE = "llama-3.1-sonar-large-128k-online"
MODEL_LLAMA_31_SONAR_HUGE_128K_ONLINE = "llama-3.1-sonar-huge-128k-online"

# Sonar chat models
MODEL_LLAMA_31_SONAR_SMALL_128K_CHAT = "llama-3.1-sonar-small-128k-chat"
MODEL_LLAMA_31_SONAR_LARGE_128K_CHAT = "llama-3.1-sonar-large-128k-chat"

# Open-source instruct models
MODEL_LLAMA_31_8B_INSTRUCT = "llama-3.1-8b-instruct"
MODEL_LLAMA_31_70B_INSTRUCT = "llama-3.1-70b-instruct"

KNOWN_MODELS = (
    MODEL_LLAMA_31_SONAR_SMALL_128K_ONLINE,
    MODEL_LLAMA_31_SONAR_LARGE_128K_ONLINE,
    MODEL_LLAMA_31_SONAR_HUGE_128K_ONLINE,
    MODEL_LLAMA_31_SONAR_SMALL_128K_CHAT,
    MODEL_LLAMA_31_SONAR_LARGE_128K_CHAT,
    MODEL_LLAMA_31_8B_INSTRUCT,
    MODEL_LLAMA_31_70B_INSTRUCT,
)

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

FINISH_REASON_STOP = "stop"
