"""CV Review AI: upload a CV, get structured LLM feedback."""
