"""
Module for generating text (cleaning and summarizing transcripts) with LLM models.
"""

import os
from typing import Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from khmerscribe.config import config
from khmerscribe.core.prompts import clean_transcript_template, summary_template
from khmerscribe.models.schemas import GenerationConfig
from khmerscribe.utils.error_handling import UpstreamError
from khmerscribe.utils.logger import logging


class TextGenerator:
    """One text-generation capability, driven by different instruction templates."""

    def __init__(self, generation_config: Optional[GenerationConfig] = None, api_key: Optional[str] = None):
        """
        Initialize the generator with API key.

        Args:
            generation_config: Model settings
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.generation_config = generation_config or GenerationConfig()
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        if not self.api_key:
            raise ValueError("Groq API key is required. Set it in .env file or pass directly.")

        os.environ["GROQ_API_KEY"] = self.api_key

        self.llm = init_chat_model(
            model=self.generation_config.model,
            model_provider=self.generation_config.model_provider,
            temperature=self.generation_config.temperature,
            max_tokens=self.generation_config.max_tokens
        )

    def generate(self, template: str, max_tokens: Optional[int] = None, **variables) -> str:
        """
        Run one instruction template against the chat model.

        Args:
            template: System prompt with ``{placeholders}``
            max_tokens: Output cap for this call, overriding the configured one
            **variables: Values for the placeholders

        Returns:
            Generated text
        """
        prompt = ChatPromptTemplate.from_messages([
            ("system", template)
        ])
        messages = prompt.invoke(variables)
        llm = self.llm.bind(max_tokens=max_tokens) if max_tokens else self.llm

        try:
            response = llm.invoke(messages)
        except Exception as e:
            logging.error(f"Error generating text: {str(e)}")
            raise UpstreamError(f"Text generation failed: {str(e)}") from e

        text = (response.content or "").strip()
        if not text:
            raise UpstreamError("Text generation returned no text")

        metadata = getattr(response, "response_metadata", None) or {}
        if metadata.get("finish_reason") == "length":
            logging.warning(f"Generated text hit the output token limit and is truncated ({len(text)} characters)")
        return text

    def clean(self, transcript_text: str) -> str:
        """Strip sponsor segments, ads and filler words from a transcript."""
        logging.info(f"Cleaning transcript ({len(transcript_text)} characters)")
        return self.generate(
            clean_transcript_template,
            max_tokens=self.generation_config.clean_max_tokens,
            text=transcript_text,
        )

    def summarize(self, transcript_text: str, language: str = config.SUMMARY_LANGUAGE) -> str:
        """Summarize a transcript in the target language."""
        logging.info(f"Summarizing transcript in {language} ({len(transcript_text)} characters)")
        return self.generate(summary_template, text=transcript_text, language=language)
