"""
Visual Prompts - Prompts for the tools that receive thumbnail images.

The images themselves are attached by creatortune.ai.multimodal; these
builders only produce the text part. For the A/B test the text refers to
"Option A" and "Option B", which match the labels placed before each image.
"""

from creatortune.ai.operations.inputs import ABTestInput, TitleThumbnailInput


AB_TEST_PREAMBLE = "Analyze this A/B Test."


def build_title_thumbnail_prompt(inputs: TitleThumbnailInput) -> str:
    return f"""You are a world-class YouTube growth consultant with a specialization in maximizing video click-through rates (CTR). A content creator has provided a video title and its corresponding thumbnail.

Your task is to provide a comprehensive analysis and actionable recommendations. Respond ONLY with a JSON object that adheres to the provided schema.

The user's video title is: "{inputs.title}"

Analyze the provided title and thumbnail image and generate the following:
1.  **ctrRating**: A score from 1 to 10, where 1 is extremely poor and 10 is perfect, representing the estimated click-through potential of the title and thumbnail combination.
2.  **analysis**: A concise but insightful paragraph explaining the reasoning behind your rating. Address key elements like clarity, emotional hook, curiosity gap, visual hierarchy, branding, and text readability on the thumbnail.
3.  **suggestedTitle**: A new, improved title that is more compelling and SEO-friendly, while respecting the original video's core topic.
4.  **thumbnailSuggestions**: An object containing an advanced, multi-level analysis of the thumbnail based on the following criteria:
    - **emotion_use**: Does the thumbnail use emotion effectively (e.g., facial expressions)? Provide feedback.
    - **clutter**: Is the thumbnail visually cluttered? Suggest specific elements to simplify or remove.
    - **text_readability**: Analyze font choice, size, and placement for mobile readability.
    - **color_advice**: Recommend a high-contrast, high-converting color palette suitable for the topic.
    - **title_match**: Does the thumbnail visually align with the promise of the video title?
    - **ctr_prediction**: Predict the potential CTR as 'Low', 'Medium', or 'High'."""


def build_ab_test_prompt(inputs: ABTestInput) -> str:
    return f"""You are an expert A/B tester and YouTube growth strategist with deep knowledge of visual psychology and audience behavior.
You will be given two combinations of a video title and a thumbnail (Option A and Option B) and a description of the target audience.
The first image above is the Option A thumbnail and the second image is the Option B thumbnail.
Your task is to perform an exhaustive, multi-faceted analysis of both options and declare a winner.

---
Target Audience: "{inputs.target_audience}"
---
Option A Title: "{inputs.title_a}"
---
Option B Title: "{inputs.title_b}"
---

Analyze the two options based on the provided images, titles, and target audience.

Provide your response as a single JSON object adhering to the specified schema. Put the Option A analysis in **optionA** and the Option B analysis in **optionB**. For EACH option, you must generate:
1.  **ctrPrediction**: An estimated Click-Through Rate percentage.
2.  **psychologicalTriggers**: A list of psychological triggers used (e.g., Curiosity, Urgency, Authority).
3.  **attentionHeatmap**: A base64 encoded, transparent PNG image showing viewer attention hotspots (red for high, yellow for medium). THIS MUST BE A VALID BASE64 STRING FOR A TRANSPARENT PNG.
4.  **audienceFitScore**: A 0-100 score for how well it resonates with the target audience.
5.  **titleSuggestions**: Short and long variations of the title.
6.  **formattingImprovements**: Actionable suggestions for title formatting.

Additionally, provide the top-level analysis:
1.  **winner**: Declare the overall winner ('A', 'B', or 'Neither').
2.  **overallReasoning**: A summary explaining your choice.
3.  **viralVideoReferences**: Provide 2-3 examples of similar, successful videos from the same niche with their stats."""
