from hiring_signal.domain.entities import ReadmeSample
from hiring_signal.services.readme_analyzer import analyze_readme, analyze_readmes

WELL_STRUCTURED = """# My Project
[![Build](https://img.shields.io/badge/build-passing-green.svg)](https://ci.example.com)
## Installation
pip install myproject
## Usage
```bash
python -m myproject
```
## Architecture
![diagram](docs/arch.png)
## License
MIT License
"""


def test_plain_text_readme_has_no_structure():
    result = analyze_readme("Just a few words describing what the code does.")
    assert result.structural_score == 0
    assert result.score < 40
    assert result.heading_count == 0
    assert result.code_block_count == 0


def test_empty_readme():
    result = analyze_readme("")
    assert result.score == 0
    assert result.word_count == 0
    # Short READMEs are not penalised for a missing TOC or API section.
    assert "Table of Contents" not in result.missing
    assert "API documentation" not in result.missing
    assert result.missing[0] == "H1 title"


def test_detectors_on_structured_readme():
    result = analyze_readme(WELL_STRUCTURED)
    assert result.has_title
    assert result.has_installation
    assert result.has_usage
    assert result.has_architecture
    assert result.has_screenshots
    assert result.has_badges
    assert result.has_license
    assert not result.has_contributing
    assert not result.has_demo_link
    assert not result.has_impact_keywords
    assert result.heading_count == 5
    assert result.code_block_count == 1


def test_sub_scores_and_blend():
    result = analyze_readme(WELL_STRUCTURED)
    assert result.structural_score == 58
    assert result.professional_score == 55
    assert result.storytelling_score == 55
    # round(58*0.35 + 55*0.35 + 55*0.30) = round(56.05)
    assert result.score == 56
    assert result.missing == (
        "Live demo link",
        "Contributing guide",
        "Impact/scale metrics",
    )


def test_long_readme_requires_toc_and_api_docs():
    body = "# Tool\n" + "word " * 250
    result = analyze_readme(body)
    assert result.word_count > 200
    assert "Table of Contents" in result.missing
    assert "API documentation" in result.missing


def test_toc_from_anchor_list():
    content = "# Doc\n- [One](#one)\n- [Two](#two)\n- [Three](#three)\n"
    assert analyze_readme(content).has_toc


def test_demo_link_and_impact_keywords():
    content = "# App\nLive at https://myapp.vercel.app serving thousands of users in production."
    result = analyze_readme(content)
    assert result.has_demo_link
    assert result.has_impact_keywords


def test_analyze_readmes_keeps_sample_order():
    results = analyze_readmes(
        [ReadmeSample("b-repo", "# B"), ReadmeSample("a-repo", "# A")]
    )
    assert [r.repo_name for r in results] == ["b-repo", "a-repo"]
