"""Built-in emoji names used for accessible labels."""

# Keys are the emoji as typed: the Unicode sequence or the bare shortcode name.
DEFAULT_EMOJI_NAMES: dict[str, str] = {
    '\U0001F600': 'grinning face',
    '\U0001F602': 'face with tears of joy',
    '\U0001F603': 'grinning face with big eyes',
    '\U0001F609': 'winking face',
    '\U0001F60A': 'smiling face with smiling eyes',
    '\U0001F60D': 'smiling face with heart-eyes',
    '\U0001F60E': 'smiling face with sunglasses',
    '\U0001F622': 'crying face',
    '\U0001F62D': 'loudly crying face',
    '\U0001F642': 'slightly smiling face',
    '\U0001F643': 'upside-down face',
    '\U0001F644': 'face with rolling eyes',
    '\U0001F914': 'thinking face',
    '\U0001F923': 'rolling on the floor laughing',
    '\U0001F440': 'eyes',
    '\U0001F44B': 'waving hand',
    '\U0001F44C': 'OK hand',
    '\U0001F44D': 'thumbs up',
    '\U0001F44E': 'thumbs down',
    '\U0001F44F': 'clapping hands',
    '\U0001F64F': 'folded hands',
    '\U0001F389': 'party popper',
    '\U0001F525': 'fire',
    '\U0001F680': 'rocket',
    '\U0001F4AF': 'hundred points',
    '\U0001F41B': 'bug',
    '\u2764\uFE0F': 'red heart',
    '\u2705': 'check mark button',
    '\u274C': 'cross mark',
    '\u2728': 'sparkles',
    '\u26A0\uFE0F': 'warning',
    'smile': 'grinning face with smiling eyes',
    'grinning': 'grinning face',
    'joy': 'face with tears of joy',
    'wink': 'winking face',
    'sunglasses': 'smiling face with sunglasses',
    'cry': 'crying face',
    'sob': 'loudly crying face',
    'thinking_face': 'thinking face',
    'eyes': 'eyes',
    'wave': 'waving hand',
    'ok_hand': 'OK hand',
    'thumbsup': 'thumbs up',
    '+1': 'thumbs up',
    'thumbsdown': 'thumbs down',
    '-1': 'thumbs down',
    'clap': 'clapping hands',
    'pray': 'folded hands',
    'tada': 'party popper',
    'fire': 'fire',
    'rocket': 'rocket',
    '100': 'hundred points',
    'bug': 'bug',
    'heart': 'red heart',
    'white_check_mark': 'check mark button',
    'x': 'cross mark',
    'sparkles': 'sparkles',
    'warning': 'warning',
}
