IMAGE_PROMPT: str = (
    "A minimalist, atmospheric, and symbolic artistic representation of a day.\n"
    "Journal Summary: {summary}.\n"
    "{mood_context}\n"
    "{task_context}\n"
    "Style: Abstract, warm organic, fine art photography or soft painting. "
    "Focus on the emotional essence and visual metaphors."
)

PATTERN_SYSTEM_PROMPT: str = (
    "You are a JSON-only reflection engine for a journaling app. "
    "Return a strict JSON object with keys analysis and inquiryQuestions.\n"
    "- analysis MUST be a single string.\n"
    "- inquiryQuestions MUST be an array of 3 to 5 strings.\n"
)

PATTERN_PROMPT: str = (
    "Analyze the following journal history and provide deep insights into patterns of thought, "
    "emotional loops, and cycles.\n"
    "Instead of giving direct answers, provide 3-5 profound self-inquiry questions that direct "
    "the user to look deeper into their own nature.\n\n"
    "History: {history}"
)
