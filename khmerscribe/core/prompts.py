clean_transcript_template = """
    Remove all sponsor messages, advertisements, promotional content, and
    unnecessary filler words from this transcription.
    Keep only the main content and valuable information, in the original language.
    Return only the cleaned transcription, without any commentary.

    {text}
    """

summary_template = """
    Create a well-structured summary of the following content in {language} language,
    whatever language the content itself is in.
    Include the main points and key takeaways, and organize it with clear sections.

    {text}
    """
