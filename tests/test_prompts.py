"""
Prompt Builder Tests
"""
import pytest

from covergen.forms import GenerationRequest
from covergen.prompts import build_prompt, describe_tone, tone_label


@pytest.fixture
def req():
    return GenerationRequest(
        name='Grace Hopper',
        email='grace@example.com',
        tone_description='friendly and casual',
        job_description='Compiler engineer for a COBOL modernization team.',
        resume='Invented the first compiler. Rear admiral, US Navy.',
    )


class TestToneLabel:
    """Test tone value mapping"""

    @pytest.mark.parametrize('value,label', [
        (0, 'friendly and casual'),
        (3, 'friendly and casual'),
        (4, 'professional and neutral'),
        (5, 'professional and neutral'),
        (6, 'professional and neutral'),
        (7, 'very formal and businesslike'),
        (10, 'very formal and businesslike'),
    ])
    def test_scale(self, value, label):
        assert tone_label(value) == label

    @pytest.mark.parametrize('value', [-1, 11])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            tone_label(value)

    def test_describe_numeric(self):
        assert describe_tone(' 4 ') == 'professional and neutral'

    def test_describe_label_passthrough(self):
        assert describe_tone('warm but direct') == 'warm but direct'

    def test_describe_out_of_range_passthrough(self):
        assert describe_tone('42') == '42'


class TestBuildPrompt:
    """Test prompt rendering"""

    def test_contains_fields(self, req):
        prompt = build_prompt(req)
        assert req.job_description in prompt
        assert req.resume in prompt
        assert 'Name: Grace Hopper' in prompt
        assert 'Email: grace@example.com' in prompt
        assert 'Tone: friendly and casual' in prompt
        assert prompt.startswith('You are an expert career coach and resume writer.')
        assert prompt.endswith('Output:')

    def test_section_order(self, req):
        prompt = build_prompt(req)
        assert prompt.index('Job Description:') < prompt.index('Resume:') < prompt.index('Candidate Details:')

    def test_no_reason(self, req):
        prompt = build_prompt(req)
        assert 'reason for applying' not in prompt.lower()

    def test_whitespace_reason_omitted(self, req):
        req.reason_for_applying = '   '
        assert 'reason for applying' not in build_prompt(req).lower()

    def test_with_reason(self, req):
        req.reason_for_applying = 'My grandmother worked on your first mainframe'
        prompt = build_prompt(req)
        assert '"My grandmother worked on your first mainframe"' in prompt
        assert 'reason for applying' in prompt.lower()

    def test_deterministic(self, req):
        assert build_prompt(req) == build_prompt(req)

    def test_reason_kept_as_submitted(self, req):
        req.reason_for_applying = '  Because\nyour team ships weekly'
        prompt = build_prompt(req)
        assert '"  Because\nyour team ships weekly"' in prompt
