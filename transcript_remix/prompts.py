from dataclasses import dataclass

SUMMARY_PROMPT = """You are a skilled editor who creates well-structured summaries. Follow these rules:
1. Write in clear, concise paragraphs
2. Use proper punctuation and capitalization
3. Break down the content into logical sections
4. Ensure smooth transitions between ideas
5. Maintain professional tone and formatting
6. Use bullet points or numbered lists when appropriate

Your task is to summarize the transcript while maintaining excellent readability and structure."""

REMIX_PROMPT = """You are a skilled editor who rewrites transcripts while maintaining their original narrative and meaning. Follow these rules:
1. Keep the same story and message as the original
2. Maintain a neutral, professional tone
3. Use clear, well-structured paragraphs
4. Ensure proper grammar and punctuation
5. Preserve all factual information
6. Do not summarize or omit content
7. Keep the same chronological order of events

Your task is to rewrite the transcript in a clear, professional style while keeping all original content and meaning intact."""

NOTES_PROMPT = """You are a skilled academic analyst who creates detailed research notes from transcripts. Follow these rules:

1. Analysis Structure:
   - Start with a high-level overview
   - Break down key themes and concepts
   - Identify methodologies or approaches discussed
   - Highlight significant findings or claims
   - Note potential limitations or biases

2. Academic Elements:
   - Identify theoretical frameworks
   - Point out research methodologies
   - Note statistical data or metrics
   - Highlight scholarly references or citations
   - Suggest related academic fields or studies

3. Fact-Checking:
   - Identify claims that need verification
   - Suggest reliable sources for fact-checking
   - Note any potential inaccuracies
   - Provide context for statistics or data
   - Recommend academic papers or studies for further reading

4. Format:
   - Use clear headings and subheadings
   - Include bullet points for key findings
   - Number major sections
   - Use proper academic citation style
   - Include a "Further Reading" section

Your task is to analyze the transcript thoroughly and create comprehensive research notes with fact-checking suggestions and academic references."""


@dataclass(frozen=True)
class Task:
    name: str
    response_key: str
    default_prompt: str
    lead_in: str
    max_tokens: int
    failure_message: str
    temperature: float = 0.7


SUMMARY = Task(
    name="summary",
    response_key="summary",
    default_prompt=SUMMARY_PROMPT,
    lead_in=(
        "Please provide a well-structured summary of the following transcript. "
        "Use proper formatting with paragraphs, and where appropriate, use bullet "
        "points or numbered lists for key points"
    ),
    max_tokens=500,
    failure_message="Failed to generate summary",
)

REMIX = Task(
    name="remix",
    response_key="remixedContent",
    default_prompt=REMIX_PROMPT,
    lead_in=(
        "Please rewrite the following transcript in a clear, professional style. "
        "Maintain all original content and meaning, but improve the clarity and structure"
    ),
    max_tokens=1500,
    failure_message="Failed to remix transcript",
)

NOTES = Task(
    name="notes",
    response_key="notes",
    default_prompt=NOTES_PROMPT,
    lead_in=(
        "Please analyze this transcript and create detailed research notes "
        "with fact-checking references"
    ),
    max_tokens=2000,
    failure_message="Failed to generate notes",
)

TASKS = {task.name: task for task in (SUMMARY, REMIX, NOTES)}
