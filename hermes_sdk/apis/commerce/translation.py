from typing import Tuple

from hermes_sdk.apis.base import BaseApi
from hermes_sdk.core.errors import DecodeError
from hermes_sdk.schemas.translation import TranslateRequest, TranslateResponse


class TranslationApi(BaseApi):
    """Commerce Translation API (beta): machine translation of listing text."""

    base_path = "/commerce/translation/v1_beta"

    async def translate(self, translate_request: TranslateRequest) -> TranslateResponse:
        # pure function of its input, safe to replay
        return await self._call(
            "POST",
            self._path("translate"),
            json=translate_request,
            retry_safe=True,
            response_model=TranslateResponse,
        )

    async def translate_text(
        self,
        text: str,
        from_language: str,
        to_language: str,
        translation_context: str = "ITEM_TITLE",
    ) -> str:
        request = TranslateRequest(
            from_language=from_language,
            to_language=to_language,
            text=[text],
            translation_context=translation_context,
        )
        response = await self.translate(request)
        for translation in response.translations:
            if translation.translated_text is not None:
                return translation.translated_text
        raise DecodeError("No translation found in response", status_code=200)

    async def translate_listing(
        self,
        title: str,
        description: str,
        from_language: str,
        to_language: str,
    ) -> Tuple[str, str]:
        translated_title = await self.translate_text(title, from_language, to_language, "ITEM_TITLE")
        translated_description = await self.translate_text(description, from_language, to_language, "ITEM_DESCRIPTION")
        return translated_title, translated_description
