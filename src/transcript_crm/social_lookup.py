"""
Creator social profile lookup.

Asks the model for verified profile URLs and keeps only well-formed
entries. A lookup never fails the caller: any error yields an empty list.
"""

from .clients.openai_client import OpenAIClient
from .errors import error_message
from .logging import get_logger
from .models.social import SocialLookupResult, SocialProfile
from .pipeline.parsing import parse_json_response
from .prompts.social_lookup import build_social_lookup_messages

logger = get_logger(__name__)


def _valid_profiles(data: object) -> list[SocialProfile]:
    if not isinstance(data, list):
        raise ValueError('Expected a JSON array of profiles')

    profiles = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        platform = entry.get('platform')
        url = entry.get('url')
        if platform and isinstance(url, str) and url.startswith('http'):
            profiles.append(SocialProfile(platform=str(platform), url=url))
    return profiles


class SocialLookup:
    """Finds a creator's public profiles (YouTube, Instagram, TikTok, ...)."""

    def __init__(self, openai_client: OpenAIClient, max_tokens: int = 1000):
        self.openai_client = openai_client
        self.max_tokens = max_tokens

    async def find_profiles(self, creator_name: str) -> SocialLookupResult:
        """
        Look up verified profiles for a creator or brand name.

        Args:
            creator_name: Creator or brand name as typed by the operator

        Returns:
            SocialLookupResult; profiles is empty when nothing could be verified
            or the lookup failed
        """
        log = logger.bind(creator_name=creator_name)
        log.info('social_lookup.started')

        try:
            raw = await self.openai_client.chat_completion(
                messages=build_social_lookup_messages(creator_name),
                temperature=0.0,
                max_tokens=self.max_tokens,
            )
            profiles = _valid_profiles(parse_json_response(raw))
        except Exception as e:
            log.error('social_lookup.failed', error=error_message(e))
            return SocialLookupResult(creator_name=creator_name)

        log.info(
            'social_lookup.completed',
            profile_count=len(profiles),
            platforms=[p.platform for p in profiles],
        )
        return SocialLookupResult(creator_name=creator_name, profiles=profiles)


def format_profiles_text(profiles: list[SocialProfile]) -> str:
    """One 'Platform: url' line per profile."""
    return '\n'.join(f"{p.platform}: {p.url}" for p in profiles)
