# config/llm_config.py
"""Generation parameters per endpoint"""

from career_advisor.models.generation import GenerationConfig

FORM_ADVICE_GENERATION = GenerationConfig(
    temperature=0.7,  # Balance creativity and consistency
    top_p=0.8,
    top_k=40,
    max_output_tokens=2048,
    stop_sequences=["END_OF_RESPONSE"],
)

CHAT_GENERATION = GenerationConfig(
    temperature=0.8,  # More conversational
    top_p=0.9,
    max_output_tokens=1024,
)

LEARNING_PATH_GENERATION = GenerationConfig(
    temperature=0.7,
    top_p=0.8,
    max_output_tokens=2048,
)

# Prompt comparison runs with the provider's own defaults
PROMPT_TEST_GENERATION = None

# Styles exercised by the prompt comparison endpoint, in call order
PROMPT_TEST_STYLES = ["structured", "expert", "conversational"]
