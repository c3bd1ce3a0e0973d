"""
Tokenise raw English / French text for lexicon lookup.

  • lower-cases with str.lower() (accented Latin letters survive: "Êtes" -> "êtes")
  • keeps in-word apostrophes, typographic ones folded to "'" ("j'adore", "don't", "c'est")
  • keeps emoticons (":-)", ":'(", "<3", "^^", "+1") as standalone tokens
  • everything else that is not a word is punctuation and is dropped, so
    "(love)", "great,awesome", "open-source" split into plain words
"""

import regex as re

EMOTICON = r"""
    (?: [:;=] [-'^o]? [()\[\]dpo/\\|*]     # :-)  ;)  :'(  :d  :p  =)
      | </?3+                               # <3  </3
      | \^_?\^                              # ^^  ^_^
      | [+-]1                               # +1
    ) (?!\w)
"""
TOKEN_RE = re.compile(rf"(?ux) {EMOTICON} | [\w']+")
APOSTROPHES = str.maketrans({"’": "'", "ʼ": "'"})


def tokenize(text: str) -> list[str]:
    if not text:
        return []
    tokens = []
    for tok in TOKEN_RE.findall(text.lower().translate(APOSTROPHES)):
        # quotes around a word are punctuation, apostrophes inside it are not
        tok = tok.strip("'")
        if tok:
            tokens.append(tok)
    return tokens
