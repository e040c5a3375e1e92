"""
Channel Result Schemas - Results of the channel-level analysis tools.

Covers: channel audit, content strategy, audience profile, content calendar,
branding review, about-section review, engagement hacks, channel positioning
and position-shift simulation.

Field names are the JSON keys the UI renders, so they mix snake_case and
camelCase exactly as the rendering components expect. Treat them as a
versioned contract: adding a field is fine, renaming a required one is not.
"""

from enum import Enum
from typing import List

from pydantic import Field

from creatortune.ai.schemas.gemini_schema import ResultModel


# ---------------------------------------------------------------------------
# SHARED ENUMS
# ---------------------------------------------------------------------------

class Level(str, Enum):
    """Low / Medium / High rating used by several tools."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class StrategyType(str, Enum):
    GLOBAL = "Global"
    LOCAL_INDIA = "Local (India-based)"


class ContentObjective(str, Enum):
    GROW_SUBSCRIBERS = "Grow Subscribers"
    BUILD_TRUST = "Build Trust"
    BOOST_VIEWS = "Boost Views"
    DRIVE_COMMENTS = "Drive Comments"
    ENGAGE_COMMUNITY = "Engage Community"


class CalendarFormat(str, Enum):
    LONG_FORM = "Long-form Video"
    SHORT = "YouTube Short"
    LIVE = "Live Stream"
    COMMUNITY_POST = "Community Post"
    POLL = "Poll"


class ContentType(str, Enum):
    EVERGREEN = "Evergreen"
    TRENDING = "Trending"


class CtaFormat(str, Enum):
    SHORT = "YouTube Short"
    LONG_FORM = "Long-form Video"
    LIVE = "Live Stream"


class CommunityPostType(str, Enum):
    POLL = "Poll"
    IMAGE_TEASER = "Image Teaser"
    QUESTION = "Question"
    BEHIND_THE_SCENES = "Behind The Scenes"
    MEME = "Meme"


class FunnelStage(str, Enum):
    WATCHER = "Watcher"
    COMMENTER = "Commenter"
    SUBSCRIBER = "Subscriber"
    SHARER = "Sharer"


# ---------------------------------------------------------------------------
# CHANNEL AUDIT
# ---------------------------------------------------------------------------

class TitleAnalysis(ResultModel):
    title: str = Field(description="The original video title.")
    strengths: List[str] = Field(description="Positive aspects of the title (e.g., strong hook, clear value).")
    weaknesses: List[str] = Field(description="Negative aspects of the title (e.g., vague, no curiosity).")
    suggestion: str = Field(description="An improved version of the title.")


class ThumbnailReview(ResultModel):
    video_title: str = Field(description="The title of the video the thumbnail belongs to.")
    readability_score: int = Field(description="A 1-10 score for thumbnail text readability and clarity.")
    emotional_impact: str = Field(description="The emotional pull of the thumbnail (e.g., 'High curiosity', 'Low urgency').")
    contrast_feedback: str = Field(description="Feedback on color contrast and visual hierarchy.")
    suggestions: List[str] = Field(description="Actionable tips to improve the thumbnail.")


class PotentialVideo(ResultModel):
    title: str = Field(description="The title of the video with untapped potential.")
    reason_for_potential: str = Field(description="Why this video could perform better (e.g., 'Evergreen topic').")
    growth_strategy: str = Field(description="How to boost it (e.g., 'Update title and thumbnail').")


class ContentCalendarItem(ResultModel):
    day: str = Field(description="Suggested upload day (e.g., 'This Friday').")
    idea: str = Field(description="The core video idea.")
    suggested_title: str = Field(description="A clickable title for this idea.")
    thumbnail_concept: str = Field(description="A concept for the thumbnail design.")


class AuditData(ResultModel):
    overall_score: int = Field(description="Overall channel score from 1 to 100 covering clarity, consistency, titles and thumbnails.")
    title_analysis: List[TitleAnalysis] = Field(description="Analysis of up to 3 recent titles: triggers, hooks and weaknesses.")
    thumbnail_review: List[ThumbnailReview] = Field(description="Review of up to 3 recent thumbnails: readability, contrast, emotional impact.")
    niche_focus: str = Field(description="How clearly the content fits a niche, with suggestions to sharpen it.")
    potential_videos: List[PotentialVideo] = Field(description="2-3 existing videos with growth potential and why.")
    content_calendar: List[ContentCalendarItem] = Field(description="A weekly plan of 3-5 upcoming video ideas.")


# ---------------------------------------------------------------------------
# CONTENT STRATEGY
# ---------------------------------------------------------------------------

class Niche(ResultModel):
    core: str = Field(description="The core niche of the channel.")
    sub: str = Field(description="The sub-niche of the channel.")


class TrendItem(ResultModel):
    trend: str = Field(description="The identified trend.")
    source: str = Field(description="Simulated source (e.g., 'Google Trends', 'Reddit r/NicheTopic').")


class CompetitorStrategy(ResultModel):
    competitor: str = Field(description="Name of the hypothetical competitor channel.")
    analysis: str = Field(description="What makes the competitor's strategy work.")
    opportunity: str = Field(description="A content idea that fills a gap they leave.")


class PredictedComment(ResultModel):
    username: str
    comment: str


class ViralTrigger(ResultModel):
    trigger: str = Field(description="e.g., 'Curiosity', 'Social Proof', 'FOMO'")
    explanation: str = Field(description="How the trigger is used.")


class InspirationVideo(ResultModel):
    title: str
    views: str = Field(description="e.g., '2.1M views'")


class VideoIdea(ResultModel):
    idea: str = Field(description="The core concept of the video idea.")
    formatTag: str = Field(description="Format tag (e.g., '[Listicle]', '[Challenge]').")
    reason: str = Field(description="One line on why this idea fits the niche.")
    hook: str = Field(description="An attention-grabbing opening hook.")
    suggestedTitle: str = Field(description="A clickable, optimized title.")
    thumbnailConcept: str = Field(description="A clear thumbnail concept.")
    viralScore: int = Field(description="Viral potential from 0 to 100.")
    viralScoreReason: str = Field(description="Short reason for the viral score.")
    predictedComments: List[PredictedComment] = Field(description="2-3 simulated audience comments.")
    viralTriggers: List[ViralTrigger] = Field(description="Psychological triggers used in the idea.")
    trendScore: int = Field(description="0-100 score from simulated YouTube/Google trends.")
    bestDayToPost: str = Field(description="Recommended publishing day (e.g., 'Saturday').")
    contentType: ContentType = Field(description="Expected lifespan type of the content.")
    relevanceLifespan: str = Field(description="How long the content stays relevant.")
    creativeTwist: str = Field(description="A creative twist that makes the idea unique.")
    inspirationVideos: List[InspirationVideo] = Field(description="Successful videos in this space.")


class ContentStrategyData(ResultModel):
    niche: Niche = Field(description="The channel's core niche and a more specific sub-niche.")
    themes: List[str] = Field(description="The most common content themes or styles on the channel.")
    trendAnalysis: List[TrendItem] = Field(description="Current trends relevant to the niche.")
    competitorAnalysis: List[CompetitorStrategy] = Field(description="Reverse engineering of 3 top competitor channels.")
    videoIdeas: List[VideoIdea] = Field(description="3-5 unique, advanced video ideas to try next.")


# ---------------------------------------------------------------------------
# AUDIENCE PROFILE
# ---------------------------------------------------------------------------

class ViewerSummary(ResultModel):
    age: str = Field(description="Estimated age range of the ideal viewer.")
    gender: str = Field(description="Estimated gender distribution (e.g., 'Mostly Male', 'Balanced').")
    country: str = Field(description="Likely primary country or region.")


class Psychographics(ResultModel):
    personalityTraits: List[str] = Field(description="Key personality traits of the audience.")
    values: List[str] = Field(description="Core values the audience holds.")
    painPoints: List[str] = Field(description="Problems the audience faces in this niche.")
    motivations: List[str] = Field(description="What drives them to seek this content.")


class SentimentAndEmotion(ResultModel):
    emotionalTriggers: List[str] = Field(description="Emotions the content triggers (e.g., 'Curiosity', 'Humor').")
    toneAlignment: str = Field(description="How well the content's tone matches what the audience prefers.")


class CommunityHotspot(ResultModel):
    platform: str = Field(description="Where the community lives (e.g., 'Reddit', 'Discord').")
    community: str = Field(description="Name of the community (e.g., 'r/DIY').")
    reason: str = Field(description="Why it matters for this audience.")


class BehavioralPredictions(ResultModel):
    activeHours: str = Field(description="When the audience is most likely online.")
    ctaResponsiveness: str = Field(description="How the audience responds to calls to action.")
    preferredFormats: List[str] = Field(description="Formats the audience prefers (e.g., 'Shorts', 'Live Q&As').")


class ViewerArchetype(ResultModel):
    name: str = Field(description="A fictional name for the persona.")
    age: int = Field(description="The persona's age.")
    profession: str = Field(description="The persona's profession or role.")
    interests: List[str] = Field(description="The persona's key interests.")
    motivation: str = Field(description="Why this persona watches the channel.")


class AudienceOverlap(ResultModel):
    channelName: str = Field(description="A similar, hypothetical competitor channel.")
    similarities: List[str] = Field(description="Where the audiences overlap.")
    differences: List[str] = Field(description="Where the audiences differ.")


class AudienceProfileData(ResultModel):
    viewerSummary: ViewerSummary
    contentResonanceScore: int = Field(description="0-100 alignment of the content with the predicted audience.")
    psychographics: Psychographics
    sentimentAndEmotion: SentimentAndEmotion
    communityHotspots: List[CommunityHotspot] = Field(description="3-4 online communities where the audience is active.")
    behavioralPredictions: BehavioralPredictions
    viewerArchetypes: List[ViewerArchetype] = Field(description="3 fictional audience personas.")
    competitorAudienceOverlap: List[AudienceOverlap] = Field(description="Overlap with 2-3 similar channels.")
    engagementTips: List[str] = Field(description="3 actionable tips to engage this audience.")


# ---------------------------------------------------------------------------
# PERSONALIZED CONTENT CALENDAR
# ---------------------------------------------------------------------------

class CalendarFormatChoice(ResultModel):
    type: CalendarFormat = Field(description="The content format to use.")
    reasoning: str = Field(description="Why this format suits the day's objective.")


class PredictedOutcomes(ResultModel):
    reach: str = Field(description="Predicted reach (e.g., 'High', 'Above Average').")
    engagement: str = Field(description="Predicted engagement (e.g., 'High comments').")
    subscriberImpact: str = Field(description="Predicted subscriber impact (e.g., '+10-20 subs').")


class CalendarDay(ResultModel):
    day: str = Field(description="Day of the week (e.g., 'Monday').")
    objective: ContentObjective = Field(description="The strategic goal of the day's content.")
    publishTime: str = Field(description="Optimized posting time (e.g., '8:00 PM EST' or '6:30 PM IST').")
    format: CalendarFormatChoice
    idea: str = Field(description="A fresh content idea aligned with the niche.")
    hooks: List[str] = Field(description="1-2 viral hook suggestions.")
    predictedOutcomes: PredictedOutcomes
    title: str = Field(description="An optimized title for the content.")


class PersonalizedCalendarData(ResultModel):
    strategyType: StrategyType = Field(description="The strategy type the user selected.")
    calendar: List[CalendarDay] = Field(description="A 7-day personalized content calendar.")


# ---------------------------------------------------------------------------
# BRANDING REVIEW
# ---------------------------------------------------------------------------

class BrandingReviewData(ResultModel):
    rating: float = Field(description="1-10 rating of branding consistency and appeal.")
    strengths: List[str] = Field(description="Exactly 3 strengths of the current branding.")
    weaknesses: List[str] = Field(description="Exactly 3 weak points or mismatches.")
    suggestions: List[str] = Field(description="Exactly 3 beginner-friendly improvements.")


# ---------------------------------------------------------------------------
# ABOUT SECTION
# ---------------------------------------------------------------------------

class AboutSectionAnalysisData(ResultModel):
    toneAnalysis: str = Field(description="Analysis of the tone of the About text (friendly, formal, confusing...).")
    clarityAndBrandingSuggestions: List[str] = Field(description="Suggestions to improve clarity, grammar and branding.")
    alignmentWithNiche: str = Field(description="Whether the text matches the channel's likely niche.")
    missingElements: List[str] = Field(description="Missing elements such as a CTA, contact info or social links.")
    optimizedVersion: str = Field(description="A rewritten, optimized About section.")


# ---------------------------------------------------------------------------
# ENGAGEMENT HACKS
# ---------------------------------------------------------------------------

class CtaSet(ResultModel):
    format: CtaFormat
    ctas: List[str] = Field(description="Exactly 3 high-converting CTA phrases for this format.")


class TimeStampedBoost(ResultModel):
    timestamp: str = Field(description="When to apply it (e.g., 'First 10 Seconds', '70% Watch Time').")
    hack: str = Field(description="The engagement hack to apply.")
    reason: str = Field(description="Why it works at this moment.")


class CommunityTabHack(ResultModel):
    type: CommunityPostType
    idea: str = Field(description="A concrete post idea of this type.")
    reason: str = Field(description="Why this post type drives engagement.")


class FunnelStep(ResultModel):
    stage: FunnelStage
    goal: str = Field(description="The main goal for a viewer at this stage.")
    tactics: List[str] = Field(description="Tactics that move the viewer to the next stage.")


class EngagementHacksData(ResultModel):
    engagementBoostProjection: float = Field(description="Estimated engagement boost in percent if every hack is applied (25 means 25%).")
    ctaGenerator: List[CtaSet] = Field(description="Personalized CTAs, one set per video format.")
    commentTriggers: List[str] = Field(description="3-4 question prompts that spark comments.")
    timeStampedBoosts: List[TimeStampedBoost] = Field(description="Engagement boosts at specific moments of a video.")
    communityTabHacks: List[CommunityTabHack] = Field(description="A checklist of community post ideas.")
    engagementFunnel: List[FunnelStep] = Field(description="The Watcher to Sharer funnel blueprint.")
    retentionTips: List[str] = Field(description="3-5 general attention and retention tips.")


# ---------------------------------------------------------------------------
# CHANNEL POSITIONING
# ---------------------------------------------------------------------------

class AudiencePerception(ResultModel):
    intended: str = Field(description="The perception the creator intends.")
    actual: str = Field(description="The audience's likely actual perception.")
    gapAnalysis: str = Field(description="The gap between the two.")


class QuadrantPosition(ResultModel):
    name: str
    x: float = Field(description="From -100 (e.g., Entertainment) to 100 (e.g., Education).")
    y: float = Field(description="From -100 (e.g., Beginner) to 100 (e.g., Expert).")


class PositioningMap(ResultModel):
    xAxisLabel: str = Field(description="X-axis label, like 'Entertainment <-> Education'.")
    yAxisLabel: str = Field(description="Y-axis label, like 'Beginner Focus <-> Expert Focus'.")
    userPosition: QuadrantPosition = Field(description="The user's position on the map.")
    competitors: List[QuadrantPosition] = Field(description="5-10 hypothetical competitors and their positions.")


class ContentGap(ResultModel):
    angle: str = Field(description="An underserved content angle.")
    reason: str = Field(description="Why the gap exists and is worth filling.")
    exampleTitle: str = Field(description="An example title for this angle.")


class BrandArchetype(ResultModel):
    name: str = Field(description="Blended archetype name (e.g., 'The Rebel-Sage').")
    description: str
    strategy: str = Field(description="How to lean into this archetype.")
    references: List[str] = Field(description="Creators or brands with this archetype.")


class VisualDifferentiation(ResultModel):
    score: float = Field(description="0-100: how much the visuals stand out.")
    feedback: str = Field(description="Feedback on thumbnails, fonts and colors.")
    suggestions: List[str]


class HeatmapAngle(ResultModel):
    angle: str = Field(description="A content angle or sub-topic in the niche.")
    density: float = Field(description="0-100 competitor saturation.")
    opportunity: Level = Field(description="Opportunity level for the creator.")


class ActionPlanDay(ResultModel):
    day: int = Field(description="Day of the plan (1-7).")
    task: str = Field(description="One concrete task for the day.")
    reason: str = Field(description="Why the task matters for this channel.")


class AdvancedChannelPositioningData(ResultModel):
    audiencePerception: AudiencePerception
    positioningMap: PositioningMap
    contentGaps: List[ContentGap] = Field(description="3-5 content gaps the creator can fill.")
    brandArchetypes: List[BrandArchetype] = Field(description="2-3 blended brand archetypes.")
    visualDifferentiation: VisualDifferentiation
    competitiveHeatmap: List[HeatmapAngle] = Field(description="8-12 content angles with density and opportunity.")
    actionPlan: List[ActionPlanDay] = Field(description="A 7-day action plan checklist.")


# ---------------------------------------------------------------------------
# POSITION SHIFT SIMULATION
# ---------------------------------------------------------------------------

class PositionShiftSimulationData(ResultModel):
    newTitleTone: str = Field(description="The new tone to use in titles.")
    thumbnailStyleSuggestion: str = Field(description="How to change the thumbnail style to match.")
    videoHookExamples: List[str] = Field(description="3 example hooks written in the new tone.")
