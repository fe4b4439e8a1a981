"""
AI Recommendation Service
Free-text project advice from OpenAI, with retry logic and error handling
"""
import time
import logging
from typing import Optional, Dict, Any
from functools import wraps

import openai

from services.models import ProjectDescription, PROJECT_TYPES

logger = logging.getLogger(__name__)


class AIServiceError(Exception):
    """Base exception for AI service errors"""
    pass


class AIServiceUnavailable(AIServiceError):
    """Raised when AI service is not configured or unavailable"""
    pass


class AIServiceTimeout(AIServiceError):
    """Raised when AI service times out"""
    pass


def retry_on_failure(max_attempts=3, delay=2, backoff=2):
    """
    Decorator to retry function on failure with exponential backoff

    AIServiceUnavailable is raised immediately; retrying cannot fix missing configuration.

    Args:
        max_attempts: Maximum number of retry attempts
        delay: Initial delay between retries (seconds)
        backoff: Multiplier for delay on each retry
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            current_delay = delay
            last_exception = None

            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except AIServiceUnavailable:
                    raise
                except Exception as e:
                    last_exception = e
                    logger.warning(
                        f"Attempt {attempt + 1}/{max_attempts} failed for {func.__name__}: {str(e)}"
                    )

                    if attempt < max_attempts - 1:
                        logger.info(f"Retrying in {current_delay} seconds...")
                        time.sleep(current_delay)
                        current_delay *= backoff
                    else:
                        logger.error(f"All {max_attempts} attempts failed for {func.__name__}")

            raise last_exception

        return wrapper
    return decorator


CLEANING_TYPE_PROMPT_NAMES = {
    'rough': 'Rough Clean (80% of standard rate)',
    'final': 'Final Clean (Standard rate)',
    'rough_final': 'Rough & Final Clean (140% of standard rate)',
    'rough_final_touchup': 'Rough, Final & Touchup (160% of standard rate)',
}


def describe_cleaning_type(cleaning_type: str) -> str:
    return CLEANING_TYPE_PROMPT_NAMES.get(cleaning_type, 'Final Clean (Standard)')


def describe_urgency(level: int) -> str:
    if level <= 2:
        return 'Low (No Rush)'
    if level <= 5:
        return 'Medium'
    if level <= 8:
        return 'High'
    return 'Urgent (ASAP)'


def build_recommendation_prompt(description: ProjectDescription) -> str:
    """
    Prompt asking for practical advice on one cleaning project

    Args:
        description: Project being estimated

    Returns:
        Prompt text
    """
    lines = [
        "I need recommendations for a post-construction cleanup project with the following details:",
        f"- Project Type: {PROJECT_TYPES.get(description.project_type, description.project_type)}",
        f"- Cleaning Type: {describe_cleaning_type(description.cleaning_type)}",
        f"- Square Footage: {description.square_footage:,.0f} sq ft",
        f"- Has VCT Flooring: {'Yes' if description.has_vct else 'No'}",
        f"- Distance from Office: {description.distance_from_office:g} miles",
        f"- Number of Cleaners: {description.number_of_cleaners}",
        f"- Urgency Level: {description.urgency_level}/10 ({describe_urgency(description.urgency_level)})",
        f"- Staying Overnight: {'Yes' if description.staying_overnight else 'No'}",
    ]
    if description.staying_overnight:
        lines.append(f"- Number of Nights: {description.number_of_nights}")

    lines.extend([
        "",
        "Please provide:",
        "1. Any special cleaning considerations for this type of project and cleaning level",
        "2. Recommended equipment and supplies specific to the cleaning type",
        "3. Potential challenges and how to address them",
        "4. Tips to improve efficiency, especially considering the urgency level",
        "5. Any safety considerations",
    ])
    if description.staying_overnight:
        lines.append("6. Recommendations for overnight stays and team management")
    if description.urgency_level > 7:
        lines.append("7. Strategies for meeting urgent deadlines without compromising quality")
    lines.extend(["", "Keep the response concise and focused on practical advice."])

    return "\n".join(lines)


class AIService:
    """
    OpenAI-backed recommendation writer
    """

    def __init__(self, config):
        """
        Initialize AI service with configuration

        Args:
            config: Flask app configuration object
        """
        self.config = config
        self.openai_client = None

        self._initialize_clients()

    def _initialize_clients(self):
        """Initialize AI API clients"""
        if self.config.get('OPENAI_API_KEY'):
            try:
                self.openai_client = openai.OpenAI(
                    api_key=self.config['OPENAI_API_KEY'],
                    timeout=self.config.get('AI_TIMEOUT', 60),
                )
                logger.info("OpenAI client initialized")
            except Exception as e:
                logger.error(f"Failed to initialize OpenAI client: {e}")

    def call_openai(
        self,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None
    ) -> str:
        """
        Single chat completion

        Args:
            prompt: User message
            model: Model name (defaults to config)
            max_tokens: Maximum tokens (defaults to config)
            temperature: Temperature setting (defaults to config)

        Returns:
            Text of the first choice

        Raises:
            AIServiceUnavailable: If OpenAI is not configured
            AIServiceTimeout: On request timeout
            AIServiceError: On API errors
        """
        if not self.openai_client:
            raise AIServiceUnavailable("OpenAI is not configured")

        model_config = self.config['AI_MODELS']['recommendations']
        model = model or model_config['model']
        max_tokens = max_tokens or model_config['max_tokens']
        temperature = temperature if temperature is not None else model_config['temperature']

        try:
            logger.info(f"Calling OpenAI API: model={model}, max_tokens={max_tokens}")

            response = self.openai_client.chat.completions.create(
                model=model,
                messages=[{'role': 'user', 'content': prompt}],
                max_tokens=max_tokens,
                temperature=temperature
            )

            logger.info("OpenAI API call successful")
            return response.choices[0].message.content or ''

        except openai.APITimeoutError as e:
            logger.error(f"OpenAI API timeout: {e}")
            raise AIServiceTimeout(f"OpenAI API timed out: {e}")
        except openai.APIError as e:
            logger.error(f"OpenAI API error: {e}")
            raise AIServiceError(f"OpenAI API error: {e}")

    def generate_recommendations(self, description: ProjectDescription) -> str:
        """
        Free-text recommendations for a project, retried per configuration

        Args:
            description: Project being estimated

        Returns:
            Recommendation text
        """
        call = retry_on_failure(
            max_attempts=self.config.get('AI_RETRY_ATTEMPTS', 3),
            delay=self.config.get('AI_RETRY_DELAY', 2),
        )(self.call_openai)
        return call(build_recommendation_prompt(description))

    def is_available(self) -> bool:
        return self.openai_client is not None

    def status(self) -> Dict[str, Any]:
        return {
            'openai': self.is_available(),
            'model': self.config['AI_MODELS']['recommendations']['model'],
        }
