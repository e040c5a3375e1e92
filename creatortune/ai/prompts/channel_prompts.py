"""
Channel Prompts - Prompt builders for the channel-level analysis tools.

Every builder names each required top-level key of its result schema, so the
model sees the contract in the prompt as well as in the response schema.

Usage:
======
    from creatortune.ai.prompts.channel_prompts import build_channel_audit_prompt

    prompt = build_channel_audit_prompt(ChannelUrlInput(channel_url=url))
"""

from creatortune.ai.operations.inputs import (
    AboutSectionInput,
    AudienceProfileInput,
    BrandingReviewInput,
    ChannelPositioningInput,
    ChannelUrlInput,
    ContentCalendarInput,
    EngagementHacksInput,
    PositionShiftInput,
)


DEFAULT_AUDIENCE_BEHAVIOR = (
    "Assume a general audience pattern: higher engagement on evenings and weekends."
)


# ---------------------------------------------------------------------------
# URL-BASED TOOLS
# ---------------------------------------------------------------------------

def build_channel_audit_prompt(inputs: ChannelUrlInput) -> str:
    """Multi-level channel audit inferred from the channel URL."""
    return f"""You are a world-class YouTube channel growth strategist. Your task is to perform an advanced, multi-level audit based on a given YouTube channel URL.
Since you cannot access external websites, you must generate a hypothetical but realistic, deep, and actionable audit based on the channel's name and URL.
The feedback should be friendly but professional, suitable for beginner and mid-level YouTubers.

For example, if the URL is 'youtube.com/c/ThriftyHomestead', you should infer it's a channel about frugal living and homesteading and generate a relevant, in-depth audit.

Your audit must strictly follow the provided JSON schema. The analysis must be detailed and insightful.

Your audit must include:
1.  **overall_score**: A score from 1 to 100, assessing content clarity, consistency, titles, and thumbnails.
2.  **title_analysis**: A deep analysis of 2-3 hypothetical recent titles, identifying emotional triggers, hooks, and weaknesses, with suggestions.
3.  **thumbnail_review**: A review of 2-3 hypothetical thumbnails, checking readability, contrast, and emotional impact, with specific suggestions.
4.  **niche_focus**: A clear analysis on the channel's niche clarity and how to improve it.
5.  **potential_videos**: Identify 2-3 hypothetical existing videos with untapped growth potential and explain why.
6.  **content_calendar**: Suggest a weekly content plan with 3-5 video ideas, including powerful titles and thumbnail concepts.

The YouTube Channel URL is: {inputs.channel_url}"""


def build_content_strategy_prompt(inputs: ChannelUrlInput) -> str:
    return f"""You are a world-class YouTube strategist and trend analyst. Analyze the provided YouTube channel URL to generate a highly advanced and actionable content strategy.
Since you cannot access external websites, you must generate a hypothetical but realistic and insightful analysis based on the channel's name and URL.
For example, if the URL is 'youtube.com/c/BudgetBuilds', infer it's a channel about PC building on a budget.

Your analysis must be structured and detailed. Respond ONLY with a JSON object that adheres to the provided schema.

Your analysis must include:
1.  **niche** and **themes**: The channel's core/sub-niche and common content themes.
2.  **trendAnalysis**: Simulate pulling 1-2 latest trending topics related to the user's niche from sources like Google Trends or Reddit.
3.  **competitorAnalysis**: Simulate an analysis of 3 top-performing competitor channels. For each, identify a content gap or an opportunity.
4.  **videoIdeas**: Provide 3-5 enhanced video ideas. For EACH idea, you MUST provide:
    - **idea**, **formatTag**, **reason**, **hook**, **suggestedTitle**, **thumbnailConcept**, **viralScore**, **viralScoreReason**, and **predictedComments**.
    - **viralTriggers**: A breakdown of psychological triggers (like curiosity, FOMO) used in the idea and how they work.
    - **trendScore**: A 0-100 score based on simulated current YouTube/Google trends.
    - **bestDayToPost**: The single most effective day to publish.
    - **contentType** and **relevanceLifespan**: Classify as 'Evergreen' or 'Trending' and explain its relevance lifespan.
    - **creativeTwist**: Suggest one creative twist to make the idea stand out.
    - **inspirationVideos**: List 1-2 top-performing YouTube videos in this idea space with their titles and view counts.

The YouTube Channel URL is: {inputs.channel_url}"""


# ---------------------------------------------------------------------------
# CHANNEL DATA TOOLS
# ---------------------------------------------------------------------------

def build_audience_profile_prompt(inputs: AudienceProfileInput) -> str:
    return f"""You are an AI YouTube audience and psychographic analyst. Your task is to generate a deeply detailed Target Audience Profile based on the provided video titles, descriptions, and the channel's "About" section. Your analysis must be useful for a creator who wants to grow their channel fast.

Analyze the following channel data:
---
Video Titles (semicolon-separated):
{inputs.titles}
---
Video Descriptions (a few examples, separated by '---'):
{inputs.descriptions}
---
Channel About Section:
{inputs.about}
---

Now, generate a comprehensive, multi-layered audience analysis. Respond ONLY with a JSON object that adheres to the provided schema. Your response must include:

1.  **viewerSummary**: Basic demographics (age, gender, country).
2.  **contentResonanceScore**: A 0-100 score on how well the content aligns with the audience.
3.  **psychographics**: Detailed profiling including personality traits, values, pain points, and motivations.
4.  **sentimentAndEmotion**: Emotional triggers and tone alignment.
5.  **communityHotspots**: A list of 3-4 relevant online communities (e.g., subreddits, Discords) where this audience is active.
6.  **behavioralPredictions**: Predictions of active hours, CTA responsiveness, and preferred content formats.
7.  **viewerArchetypes**: 3 detailed, fictional audience personas with names, professions, interests, and motivations.
8.  **competitorAudienceOverlap**: An analysis of audience similarities and differences with 2-3 hypothetical competitor channels.
9.  **engagementTips**: 3 clear, actionable tips to better engage this audience."""


def build_content_calendar_prompt(inputs: ContentCalendarInput) -> str:
    """7-day calendar; a missing audience behaviour falls back to a default pattern."""
    audience_behavior = inputs.audience_behavior or DEFAULT_AUDIENCE_BEHAVIOR
    strategy_type = inputs.strategy_type.value

    return f"""Act as an expert YouTube growth strategist and data analyst.
You are given a YouTube channel's niche, its top video titles, audience behavior, and a desired strategy type.
Your task is to generate a highly advanced and actionable 7-day personalized content calendar.

---
Channel Niche: {inputs.niche}
Top Video Titles (for context): {inputs.top_titles}
Audience Behavior & Activity: {audience_behavior}
Strategy Type: {strategy_type}
---

Your response must be a single JSON object adhering to the specified schema.
Set **strategyType** to '{strategy_type}' and put the 7 days in **calendar**. For EACH day you must generate the following:

1.  **Intent-Based Strategy**: Assign a clear 'objective' for each idea ('Grow Subscribers', 'Build Trust', 'Boost Views', 'Drive Comments', 'Engage Community').
2.  **Optimal Publish Time**: Suggest the best 'publishTime'. For 'Global' strategy, use a general time like '4:00 PM EST'. For 'Local (India-based)', use a specific IST time and consider local trends.
3.  **Content Format Variety**: Provide a varied 'format' plan (Long-form, Shorts, Live, Community Post, Poll) and include a 'reasoning' for why that format is chosen for the day's objective.
4.  **AI Hook Suggestions**: Generate 1-2 compelling, viral 'hooks' for each main video/short idea.
5.  **Goal-Based Outcomes**: Predict the 'predictedOutcomes' (reach, engagement, subscriberImpact) for each content piece.
6.  **Strategy Adaptation**: If the strategy is 'Local (India-based)', incorporate culturally relevant themes, languages (e.g., Hinglish), or event tie-ins if applicable. For 'Global', keep themes broad.
7.  **Title**: Provide an optimized 'title' for the content piece."""


def build_branding_review_prompt(inputs: BrandingReviewInput) -> str:
    return f"""You are an expert YouTube brand strategist.
You have been given the following details about a YouTube channel's visuals and copy. Your task is to review and rate the overall branding quality.

---
Channel Name: "{inputs.name}"
Channel Handle: "@{inputs.handle}"
Profile Picture Description: "{inputs.pfp_description}"
Channel Banner Description: "{inputs.banner_description}"
About Section: "{inputs.about}"
Example Video Titles: "{inputs.titles}"
---

Based on this information, provide a detailed branding analysis. Respond ONLY with a JSON object that adheres to the provided schema.

Your response must include:
1.  **rating**: A rating of the consistency and appeal of the branding (out of 10).
2.  **strengths**: Identify exactly 3 strengths.
3.  **weaknesses**: Identify exactly 3 weak points or mismatches.
4.  **suggestions**: Give exactly 3 actionable suggestions to improve the channel branding. Ensure the advice is specific and beginner-friendly."""


def build_about_section_prompt(inputs: AboutSectionInput) -> str:
    return f"""You are an expert YouTube channel strategist specializing in branding and communication.
Your task is to analyze a channel's "About" section text.

The user has provided the following "About" section text:
---
{inputs.about_text}
---

Based on this text, provide a comprehensive analysis. Respond ONLY with a JSON object that adheres to the provided schema.

Your analysis must include:
1.  **toneAnalysis**: A detailed analysis of the text's tone.
2.  **clarityAndBrandingSuggestions**: Actionable suggestions to improve clarity, grammar, and branding.
3.  **alignmentWithNiche**: How well the description aligns with the probable channel niche.
4.  **missingElements**: Key missing elements like CTAs, contact info, or social links.
5.  **optimizedVersion**: A rewritten, improved version of the text."""


def build_engagement_hacks_prompt(inputs: EngagementHacksInput) -> str:
    return f"""You are an AI YouTube engagement growth consultant. Your job is to analyze a channel's content style and size to provide an advanced, multi-layered engagement blueprint.
Base your advice on the provided channel data. Your response MUST be a JSON object adhering to the specified schema.

---
Channel Data:
- Size: {inputs.channel_size.value} subscribers
- Recent Video Titles & Descriptions: {inputs.titles_and_descriptions}
---

From this data, infer the channel's niche, tone, and audience behavior. Then, generate the following advanced engagement plan:
1.  **engagementBoostProjection**: Estimate the potential percentage increase in engagement if the user applies all hacks.
2.  **ctaGenerator**: Generate 3 distinct, high-converting CTAs for each format: 'YouTube Short', 'Long-form Video', and 'Live Stream'. These should be tailored to the channel's niche.
3.  **commentTriggers**: Provide 3-4 niche-relevant, question-based prompts to spark comments.
4.  **timeStampedBoosts**: Suggest 3-4 key moments in a video (e.g., 'First 10s', '70% watch time') to place specific engagement hacks and explain why.
5.  **communityTabHacks**: Create a mini-checklist of 4-5 high-engagement community post ideas, including the type, a specific idea, and the reasoning.
6.  **engagementFunnel**: Detail the 4 stages ('Watcher', 'Commenter', 'Subscriber', 'Sharer'). For each stage, define the goal and list specific tactics to move viewers to the next stage.
7.  **retentionTips**: Provide 3-5 general tips for improving viewer attention, which will be included in the final report.

Make all advice practical, highly specific, and tailored to the channel's inferred niche and size."""


# ---------------------------------------------------------------------------
# POSITIONING
# ---------------------------------------------------------------------------

def build_channel_positioning_prompt(inputs: ChannelPositioningInput) -> str:
    return f"""You are an expert YouTube brand strategist and market analyst. Analyze the provided channel information to create an advanced, multi-layered positioning report.

--- Channel Data ---
Niche: "{inputs.niche}"
Intended Tone: "{inputs.tone}"
About Section: "{inputs.about}"
Example Titles: "{inputs.titles}"
Sample Audience Comments: "{inputs.sample_comments}"
Description of Visuals (Thumbnails, Colors, Fonts): "{inputs.visuals}"
---

Based on ALL the provided information, generate a comprehensive report. Respond ONLY with a JSON object adhering to the specified schema. Your report MUST include:
1.  **audiencePerception**: Analyze the gap between the intended perception (from tone, about section) and the actual perception (from comments, titles).
2.  **positioningMap**: Create a 2x2 quadrant map. Define the X and Y axes (e.g., Entertainment vs Education, Beginner vs Expert). Place the user's channel on this map (x,y from -100 to 100) and generate 5-10 plausible competitors with their positions.
3.  **contentGaps**: Identify 3-5 unique, underserved content angles based on the positioning map and competitor analysis. Provide a reason and example title for each.
4.  **brandArchetypes**: Assign 2-3 blended brand archetypes (e.g., "The Rebel + The Sage"). Provide a description, strategy, and real-world references for each.
5.  **visualDifferentiation**: Based on the visuals description, provide a score (0-100) and feedback on how well the channel's visuals stand out from implied competitors.
6.  **competitiveHeatmap**: Generate a heatmap of 8-12 content angles in the niche, showing their competitive density (0-100) and opportunity level (Low, Medium, High). Highlight where the creator can win.
7.  **actionPlan**: Based on all the analysis, generate a simple 7-day action plan. Each day should have one concrete, easy-to-follow task that will help the creator improve their channel positioning (e.g., 'Day 1: Research 3 competitor titles that use numbers.'). Provide a short reason for each task."""


def build_position_shift_prompt(inputs: PositionShiftInput) -> str:
    return f"""You are a YouTube rebranding strategist. A creator wants to shift their channel's positioning.

Current Positioning Summary: "{inputs.current_positioning}"
Desired Shift: "Become {inputs.desired_shift.value}"

Based on this, generate a mini-plan for this shift. Respond ONLY with a JSON object that adheres to the provided schema. Your response must include:
1.  **newTitleTone**: A description of the new tone they should adopt for their video titles.
2.  **thumbnailStyleSuggestion**: Specific, actionable advice on how to change their thumbnail style (colors, fonts, imagery).
3.  **videoHookExamples**: Three distinct examples of video hooks they could use that reflect this new positioning."""
