from models import Agent, Indicator, IndicatorCategory

DEFAULT_AGENTS: dict[str, Agent] = {
    'kanu': Agent(
        id='24e9a167-eeac-49df-b912-18355136f11f',
        name='Kanu',
        description='helllo world',
        external_id='kan_id',
        status='Live',
        agent_type='normal',
        indicators=[
            Indicator(
                id='1770918079308',
                name='message-sent',
                category=IndicatorCategory.ACTIVITY,
                human_value_equivalent=1,
                per_minute_enabled=False,
                sample_usage=150,
            ),
            Indicator(
                id='1770960227498',
                name='article-generated',
                category=IndicatorCategory.OUTCOME,
                human_value_equivalent=2,
                per_minute_enabled=False,
                sample_usage=20,
            ),
        ],
    ),
    'manu': Agent(
        id='f4ee5548-4462-416f-a5dc-fb8354c7b6b2',
        name='Manu',
        description='Voice and text to speech',
        external_id='manu_id',
        status='Live',
        agent_type='voice',
        indicators=[
            Indicator(
                id='1770967230303',
                name='voice-generated',
                category=IndicatorCategory.OUTCOME,
                human_value_equivalent=1,
                per_minute_enabled=True,
                sample_usage=50,
            ),
        ],
    ),
}
