"""
Creator social profile lookup prompt.
"""

PLATFORMS_TO_SEARCH = [
    'YouTube',
    'Instagram',
    'TikTok',
    'Twitter/X',
    'LinkedIn',
    'Patreon',
    'Ko-fi',
    'Kick',
    'Website',
]

SOCIAL_LOOKUP_PROMPT_TEMPLATE = """Find the official social media profiles and website for "{creator_name}" (content creator/brand).

Look for their presence on these platforms: {platforms}

IMPORTANT:
- Only include profiles that you can verify actually exist and belong to this creator
- Do NOT guess or make up URLs; only return real, verified profile URLs
- If you can't find a profile on a platform, don't include it
- For YouTube, use their actual channel URL (youtube.com/@username or youtube.com/c/channelname)
- For Instagram, use their actual profile (instagram.com/username)
- For TikTok, use their actual profile (tiktok.com/@username)
- For Twitter/X, use their actual profile (twitter.com/username or x.com/username)
- For their website, use their official website domain

Return ONLY a JSON array of found profiles in this exact format:
[
  {{"platform": "YouTube", "url": "https://www.youtube.com/@actualusername"}},
  {{"platform": "Instagram", "url": "https://www.instagram.com/actualusername"}}
]

If you cannot find any verified profiles, return an empty array: []

Return ONLY the JSON array, no other text."""


def build_social_lookup_messages(creator_name: str) -> list[dict[str, str]]:
    """Build the single-turn lookup prompt for a creator name."""
    prompt = SOCIAL_LOOKUP_PROMPT_TEMPLATE.format(
        creator_name=creator_name,
        platforms=', '.join(PLATFORMS_TO_SEARCH),
    )
    return [{'role': 'user', 'content': prompt}]
