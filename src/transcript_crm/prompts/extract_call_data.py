"""
Call data extraction prompts.

The model answers in free-form JSON matching the schema embedded in the
system prompt; the extractor validates it into ExtractedData.
"""

# =============================================================================
# Prompt Templates
# =============================================================================

EXTRACTION_SCHEMA = """{
  "contacts": [
    {
      "firstName": string | null,
      "lastName": string | null,
      "email": string | null,
      "phone": string | null,
      "company": string | null,
      "jobTitle": string | null
    }
  ],
  "deal": {
    "name": string | null,
    "stage": "discovery" | "qualification" | "proposal" | "negotiation" | "closed_won" | "closed_lost" | null,
    "amount": number | null,
    "closeDate": string | null,
    "notes": string | null
  },
  "callSummary": string,
  "actionItems": string[],
  "nextSteps": string[],
  "sentiment": "positive" | "neutral" | "negative",
  "manufacturing": {
    "products": string[],
    "quantities": string | null,
    "materials": string[],
    "timeline": string | null,
    "requirements": string[],
    "concerns": string[]
  },
  "creativeInfo": {
    "themes": string[],
    "inspiration": string[],
    "colors": string[],
    "brandElements": string[],
    "socialLinks": string[],
    "websiteLinks": string[]
  }
}"""

EXTRACTION_SYSTEM_PROMPT_TEMPLATE = """You are an expert at extracting structured data from sales call transcripts.
Analyze the provided transcript and extract the following information in JSON format.

IMPORTANT: Only extract information that is explicitly mentioned or strongly implied in the transcript.
Use null for fields where information is not available. Use empty arrays [] when no items are found.
{attendee_instructions}
Extract:
1. Contact information for ALL external attendees (not internal {company_name} employees). Each contact needs: firstName, lastName, email, phone, company, jobTitle
2. Deal information (name, stage, amount, closeDate, notes)
3. A concise call summary (2-3 sentences)
4. Action items mentioned during the call
5. Next steps discussed
6. Overall sentiment of the call (positive, neutral, negative)
7. Manufacturing & product info: products discussed (t-shirts, hoodies, mugs, books, etc.), quantities, materials/fabrics/packaging, production timeline, special requirements, manufacturing concerns
8. Creative/design info: visual themes, aesthetic directions, inspiration sources, color preferences, brand elements (logos, existing designs), social media links/handles, website URLs

For deal stage, use one of: discovery, qualification, proposal, negotiation, closed_won, closed_lost
Only set a stage if there is a clear indication from the conversation.

Respond ONLY with valid JSON matching this schema:
{schema}"""

ATTENDEE_INSTRUCTIONS_TEMPLATE = """
ATTENDEE EMAILS PROVIDED: {emails}
IMPORTANT: Use these emails for the contacts. Match each email to the person speaking in the transcript based on their name or role.
"""

EXTRACTION_USER_PROMPT_TEMPLATE = """Meeting Title: {title}
Date: {date}
Attendee Emails: {emails}

TRANSCRIPT:
{transcript}"""


def build_extraction_messages(
    transcript: str,
    attendee_emails: list[str] | None = None,
    title: str | None = None,
    date: str | None = None,
    company_name: str = 'our company',
) -> list[dict[str, str]]:
    """
    Build the extraction prompt messages for OpenAI.

    Args:
        transcript: The call transcript
        attendee_emails: Known attendee emails to map onto speakers
        title: Optional meeting title for context
        date: Optional meeting date for context
        company_name: Name of the internal company whose staff are not contacts

    Returns:
        List of message dicts for OpenAI chat completion
    """
    emails = attendee_emails or []
    attendee_instructions = (
        ATTENDEE_INSTRUCTIONS_TEMPLATE.format(emails=', '.join(emails)) if emails else ''
    )

    system_prompt = EXTRACTION_SYSTEM_PROMPT_TEMPLATE.format(
        attendee_instructions=attendee_instructions,
        company_name=company_name,
        schema=EXTRACTION_SCHEMA,
    )
    user_prompt = EXTRACTION_USER_PROMPT_TEMPLATE.format(
        title=title or 'Unknown',
        date=date or 'Unknown',
        emails=', '.join(emails) if emails else 'Not provided',
        transcript=transcript,
    )

    return [
        {'role': 'system', 'content': system_prompt},
        {'role': 'user', 'content': user_prompt},
    ]
