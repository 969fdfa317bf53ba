from typing import Any, Dict, Optional
import json
import logging
import re

import httpx
from openai import AsyncOpenAI, OpenAIError

from ..errors import MissingCredentialError, SummaryError

logger = logging.getLogger(__name__)

MIN_CONTENT_CHARS = 150
MAX_PROMPT_CHARS = 12000

SCRIPT_RE = re.compile(r'<script[\s\S]*?</script>', re.IGNORECASE)
STYLE_RE = re.compile(r'<style[\s\S]*?</style>', re.IGNORECASE)
BODY_RE = re.compile(r'<body[\s\S]*?</body>', re.IGNORECASE)
TAG_RE = re.compile(r'<[^>]+>')
WHITESPACE_RE = re.compile(r'\s+')


def extract_main_text(html: str) -> str:
    html = SCRIPT_RE.sub('', html)
    html = STYLE_RE.sub('', html)
    body = BODY_RE.search(html)
    if body:
        html = body.group(0)
    text = TAG_RE.sub(' ', html)
    return WHITESPACE_RE.sub(' ', text).strip()


class Summary:
    def __init__(self, summary: str, tags: str):
        self.summary = summary
        self.tags = tags

    def to_dict(self) -> Dict[str, str]:
        return {'summary': self.summary, 'tags': self.tags}


def prefill_fields(fields: Dict[str, str], summary: Summary) -> Dict[str, str]:
    """Copy a summary into the bookmark form without clearing fields it has no value for."""
    prefilled = dict(fields)
    if summary.summary:
        prefilled['title'] = summary.summary
        prefilled['note'] = f'"{summary.summary}"'
    if summary.tags:
        prefilled['tags'] = summary.tags
    return prefilled


def _tags_text(value: Any) -> str:
    if isinstance(value, list):
        return ', '.join(str(tag).strip() for tag in value if str(tag).strip())
    if isinstance(value, str):
        return value.strip()
    return ''


class SummaryService:
    """Client for the article summarization collaborator used by auto-fill."""

    def __init__(self, api_key: Optional[str] = None, model: str = "gpt-3.5-turbo",
                 fetch_timeout: float = 15.0, client: Optional[AsyncOpenAI] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.model = model
        self.fetch_timeout = fetch_timeout
        self.client = client
        self.transport = transport

    async def summarize(self, url: str) -> Summary:
        if not self.api_key and self.client is None:
            raise MissingCredentialError()

        html = await self._fetch_page(url)
        text = extract_main_text(html)
        if len(text) < MIN_CONTENT_CHARS:
            raise SummaryError("Not enough readable content", status_code=422)

        data = await self._complete(text)
        return Summary(summary=str(data.get('summary') or '').strip(), tags=_tags_text(data.get('tags')))

    async def _fetch_page(self, url: str) -> str:
        try:
            async with httpx.AsyncClient(follow_redirects=True, timeout=self.fetch_timeout,
                                         transport=self.transport) as http:
                response = await http.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {url}: {str(e)}")
            raise SummaryError("Failed to fetch article", status_code=422) from e
        if response.is_error:
            raise SummaryError("Failed to fetch article", status_code=422)
        return response.text

    async def _complete(self, text: str) -> Dict[str, Any]:
        if self.client is not None:
            return await self._request_summary(self.client, text)
        # Each request runs on its own event loop; the client must not outlive it.
        async with AsyncOpenAI(api_key=self.api_key) as client:
            return await self._request_summary(client, text)

    async def _request_summary(self, client: AsyncOpenAI, text: str) -> Dict[str, Any]:
        prompt = (
            "Based on the following article text, provide a one-sentence summary and suggest 3 to 5 "
            "relevant tags (as a comma-separated string). Return ONLY a valid JSON object with keys "
            f"\"summary\" and \"tags\".\n\nArticle:\n{text[:MAX_PROMPT_CHARS]}"
        )

        try:
            response = await client.chat.completions.create(
                model=self.model,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": "You are a helpful assistant that returns strict JSON."},
                    {"role": "user", "content": prompt}
                ],
            )
        except OpenAIError as e:
            logger.error(f"Error generating summary: {str(e)}")
            raise SummaryError(str(e)) from e

        content = response.choices[0].message.content or ''
        try:
            data = json.loads(content)
        except ValueError as e:
            raise SummaryError(f"Summary response is not valid JSON: {content[:200]}") from e
        if not isinstance(data, dict):
            raise SummaryError("Summary response is not a JSON object")
        return data
