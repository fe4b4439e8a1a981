"""
Tests for the OpenAI recommendation service
"""
import pytest
from unittest.mock import Mock, patch
from config import TestingConfig
from ai_service import (
    AIService,
    AIServiceError,
    AIServiceUnavailable,
    AIServiceTimeout,
    retry_on_failure,
    build_recommendation_prompt,
    describe_urgency,
)


def make_config(**overrides):
    config = {
        'OPENAI_API_KEY': None,
        'AI_MODELS': TestingConfig.AI_MODELS,
        'AI_RETRY_ATTEMPTS': 2,
        'AI_RETRY_DELAY': 0,
        'AI_TIMEOUT': 10,
    }
    config.update(overrides)
    return config


def completion(text):
    message = Mock()
    message.content = text
    choice = Mock()
    choice.message = message
    response = Mock()
    response.choices = [choice]
    return response


@pytest.mark.unit
class TestPrompt:
    """Tests for the recommendation prompt"""

    def test_prompt_describes_project(self, sample_description):
        prompt = build_recommendation_prompt(sample_description)
        assert '- Project Type: Office Space' in prompt
        assert '- Square Footage: 5,000 sq ft' in prompt
        assert '- Urgency Level: 1/10 (Low (No Rush))' in prompt
        assert 'Number of Nights' not in prompt

    def test_prompt_overnight_and_urgent(self, sample_description):
        prompt = build_recommendation_prompt(sample_description.with_changes(
            staying_overnight=True, number_of_nights=2, urgency_level=9))
        assert '- Number of Nights: 2' in prompt
        assert 'overnight stays' in prompt
        assert 'urgent deadlines' in prompt

    @pytest.mark.parametrize('level,label', [(1, 'Low (No Rush)'), (5, 'Medium'), (8, 'High'), (10, 'Urgent (ASAP)')])
    def test_describe_urgency(self, level, label):
        assert describe_urgency(level) == label


@pytest.mark.unit
class TestRetry:
    """Tests for the retry decorator"""

    def test_retries_then_succeeds(self):
        calls = []

        @retry_on_failure(max_attempts=3, delay=0)
        def flaky():
            calls.append(1)
            if len(calls) < 3:
                raise AIServiceError('boom')
            return 'ok'

        assert flaky() == 'ok'
        assert len(calls) == 3

    def test_raises_last_error(self):
        @retry_on_failure(max_attempts=2, delay=0)
        def broken():
            raise AIServiceTimeout('slow')

        with pytest.raises(AIServiceTimeout):
            broken()

    def test_unavailable_is_not_retried(self):
        calls = []

        @retry_on_failure(max_attempts=3, delay=0)
        def unconfigured():
            calls.append(1)
            raise AIServiceUnavailable('no key')

        with pytest.raises(AIServiceUnavailable):
            unconfigured()
        assert len(calls) == 1


@pytest.mark.unit
class TestAIService:
    """Tests for the OpenAI client wrapper"""

    def test_unavailable_without_key(self, sample_description):
        service = AIService(make_config())
        assert service.is_available() is False
        assert service.status() == {'openai': False, 'model': 'gpt-3.5-turbo'}
        with pytest.raises(AIServiceUnavailable):
            service.generate_recommendations(sample_description)

    @patch('ai_service.openai.OpenAI')
    def test_generate_recommendations(self, mock_openai, sample_description):
        client = mock_openai.return_value
        client.chat.completions.create.return_value = completion('Bring extra microfiber.')

        service = AIService(make_config(OPENAI_API_KEY='sk-test'))
        text = service.generate_recommendations(sample_description)

        assert text == 'Bring extra microfiber.'
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs['model'] == 'gpt-3.5-turbo'
        assert kwargs['max_tokens'] == 500
        assert 'Office Space' in kwargs['messages'][0]['content']

    @patch('ai_service.openai.OpenAI')
    def test_generate_recommendations_retries(self, mock_openai, sample_description):
        client = mock_openai.return_value
        client.chat.completions.create.side_effect = [RuntimeError('reset'), completion('Second try.')]

        service = AIService(make_config(OPENAI_API_KEY='sk-test'))

        assert service.generate_recommendations(sample_description) == 'Second try.'
        assert client.chat.completions.create.call_count == 2
