"""
Script Prompts - Script generation, segment rewrite and retention analysis.
"""

from typing import List

from creatortune.ai.operations.inputs import (
    RetentionAnalysisInput,
    ScriptGenerationInput,
    ScriptRewriteInput,
)


def build_script_generation_prompt(inputs: ScriptGenerationInput) -> str:
    return f"""You are an expert YouTube scriptwriter who understands emotional pacing and viral mechanics.
Your task is to write a complete, high-quality script package based on the provided inputs.

Video Topic: "{inputs.topic}"
Target Audience: "{inputs.audience}"
Desired Tone: "{inputs.tone.value}"
Platform Format: "{inputs.platform.value}"

Your response MUST be a single JSON object that adheres to the provided schema. The script must be unique, engaging, and structured for high retention.

Your script package MUST include:
1.  **script_sections**: Break the script down into logical sections (e.g., Hook, Intro, Point 1, Climax, Outro). For EACH section, you must provide:
    - A clear 'section_title'.
    - The main 'text' for that section.
    - The dominant 'emotion' ('Humor', 'Tension', 'Inspiration', etc.).
    - An optional 'pacing_feedback' tip (e.g., "Speak faster here", "Add a 2-second pause after this line").
    - An optional 'viral_trigger' with the technique used and reason (e.g., technique: 'Curiosity Gap', reason: 'Leaves the audience wanting to know the outcome').
2.  **optimized_cta**: A powerful, optimized Call-To-Action including its style, placement, and text.
3.  **voice_over_annotations**: The complete script compiled into a single text block, with helpful annotations like '(pause)' or '(emphasize)' for easy voiceover recording."""


def build_script_rewrite_prompt(inputs: ScriptRewriteInput) -> str:
    return f"""You are an expert copy editor. A user has selected a piece of text from a script and wants you to rewrite it in a few different ways.
The overall tone of the script is '{inputs.tone.value}'.

Original Text: "{inputs.text}"

Please provide the following three variations based on the original text. Your response MUST be a single JSON object adhering to the specified schema.
1.  **shorter**: A more concise version.
2.  **more_professional**: A more formal and professional version.
3.  **funnier**: A wittier, more humorous version that still fits the overall tone."""


# ---------------------------------------------------------------------------
# RETENTION ANALYSIS
# ---------------------------------------------------------------------------

def _competitor_section(urls: List[str]) -> str:
    if not urls:
        return "No competitor URLs were provided, so omit the 'competitorAnalysis' field from your response."

    url_lines = "\n".join(f"- {url}" for url in urls)
    return f"""---
Competitor Videos to analyze (simulate if you cannot access them):
{url_lines}
---
Your analysis MUST include the 'competitorAnalysis' section. For each competitor, provide a simulated comparison of intro, mid, and end retention and give structural suggestions based on what works in their videos."""


def build_retention_analysis_prompt(inputs: RetentionAnalysisInput) -> str:
    """
    Retention analysis for a script.

    The competitor section is only requested when competitor URLs are given;
    otherwise the model is told to leave ``competitorAnalysis`` out.
    """
    audience = inputs.target_audience.value

    return f"""You are an expert YouTube video editor and audience retention strategist. Your task is to perform an advanced analysis of a video script to identify potential issues that could cause viewers to drop off and provide a comprehensive improvement plan.

The script should be analyzed for a target audience of: "{audience}".

Analyze the following script:
---
{inputs.script}
---

{_competitor_section(inputs.competitor_urls)}

Provide a comprehensive analysis based on the following criteria. Respond ONLY with a JSON object that adheres to the provided schema. Your analysis must be detailed and cover all of the following points:

1.  **retentionPredictionScore**: An overall predictive score from 0-100 for the script.
2.  **performanceSummary**: Provide a 'Good', 'Average', or 'Poor' rating for 'hookRetention' (first 15s), 'midWatchRetention' (middle section), and 'finalCtaRetention' (last 30s).
3.  **attentionCurve**: Map the attention flow. Provide 5-7 data points with emotion/state and score. Also provide a plain-English 'summary' of the engagement pattern with suggestions on hook structure or story pacing.
4.  **retentionTimeline**: This is the data for the heatmap. Identify potential drop-off zones. For each, provide the 'timestamp' range, 'retentionRisk' ('Low', 'Medium', 'High'), the specific 'dropOffCause', and the 'segmentText'.
5.  **retentionBoostTips**: For the top 3 weakest retention zones identified, provide specific, actionable content changes ('suggestion') and explain the 'reason' why it will work.
6.  **audiencePersonaMatch**: Evaluate how well the script aligns with the '{audience}' persona. Provide a 'matchScore' and detailed 'feedback'.
7.  **overallSummary**: A concise, actionable summary of the script's strengths and key areas for improvement."""
