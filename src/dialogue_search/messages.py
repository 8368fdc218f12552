"""User-facing message templates (zh-CN).

Templates are ``str.format`` strings; the placeholders used are
``question``, ``answer`` and ``probability``.
"""

NO_DIALOGUES = "没有搜索到任何问答。"
NO_ANSWERS_IN_CONTEXT = "没有搜索到任何回答，尝试切换到其他环境。"
ALL_DIALOGUES = "全部问答如下"

# Exact matching
NO_ANSWER = "没有搜索到回答“{answer}”，请尝试使用关键词匹配。"
QUESTIONS_FOR_ANSWER = "回答“{answer}”的问题如下"
NO_QUESTION = "没有搜索到问题“{question}”，请尝试使用关键词匹配。"
ANSWERS_FOR_QUESTION = "问题“{question}”的回答如下"
NO_DIALOGUE = "没有搜索到问答“{question}”“{answer}”，请尝试使用关键词匹配。"
DIALOGUE_MATCHES = "“{question}”“{answer}”匹配的回答如下"
TRIGGER_PROBABILITY = "实际触发概率：{probability}"

# Keyword matching
NO_ANSWER_KEYWORD = "没有搜索到含有关键词“{answer}”的回答。"
ANSWER_KEYWORD_RESULTS = "回答关键词“{answer}”的搜索结果如下"
NO_QUESTION_KEYWORD = "没有搜索到含有关键词“{question}”的问题。"
QUESTION_KEYWORD_RESULTS = "问题关键词“{question}”的搜索结果如下"
NO_DIALOGUE_KEYWORD = "没有搜索到含有关键词“{question}”“{answer}”的问答。"
DIALOGUE_KEYWORD_RESULTS = "问答关键词“{question}”“{answer}”的搜索结果如下"
