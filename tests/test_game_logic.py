from scramble.dictionary import DictionaryService
from scramble.game_logic import RoundEngine, is_possible, normalize


def test_is_possible_uses_each_root_letter_once():
    assert is_possible('lines', 'listen')
    assert is_possible('silent', 'listen')
    # two n's needed, listen has one
    assert not is_possible('tennis', 'listen')
    assert is_possible('baa', 'bazaar')
    assert not is_possible('baaaa', 'bazaar')
    assert not is_possible('cat', '')
    assert is_possible('', 'listen')


def test_normalize_trims_and_lowercases():
    assert normalize('  Lines\n') == 'lines'
    assert normalize('\t \n') == ''


def test_new_engine_is_awaiting_word(checker):
    engine = RoundEngine(checker)
    assert engine.status == 'awaiting_word'
    assert engine.root_word == ''
    assert engine.score == 0
    assert engine.used_words == []


def test_accepted_word_scores_its_length():
    engine = RoundEngine(DictionaryService())
    engine.start_round('catdog')
    outcome = engine.submit('cat')
    assert outcome.kind == 'accepted'
    assert outcome.accepted
    assert outcome.scoreDelta == 3
    assert outcome.title is None
    assert engine.score == 3
    assert engine.submit('dog').scoreDelta == 3
    assert engine.score == 6
    # most recent first
    assert engine.used_words == ['dog', 'cat']


def test_submission_is_normalized(engine):
    outcome = engine.submit('  LINES \n')
    assert outcome.kind == 'accepted'
    assert outcome.word == 'lines'
    assert engine.used_words == ['lines']


def test_empty_submission_changes_nothing(engine):
    engine.submit('lines')
    for raw in ('', '   ', '\n\t'):
        outcome = engine.submit(raw)
        assert outcome.kind == 'rejected_empty'
        assert outcome.title is None
        assert outcome.message is None
    assert engine.score == 5
    assert engine.used_words == ['lines']


def test_duplicate_is_rejected(engine):
    assert engine.submit('tin').accepted
    outcome = engine.submit('TIN')
    assert outcome.kind == 'rejected_duplicate'
    assert outcome.title == 'Stop Hallucinating.'
    assert outcome.message == 'You have already found tin.'
    assert engine.score == 3


def test_duplicate_checked_before_dictionary():
    known = {'tin'}
    calls = []

    def is_real_word(word, language):
        calls.append(word)
        return word in known

    engine = RoundEngine(is_real_word)
    engine.start_round('listen')
    assert engine.submit('tin').accepted
    known.clear()
    assert engine.submit('tin').kind == 'rejected_duplicate'
    assert calls == ['tin']


def test_not_a_word_is_rejected(engine):
    outcome = engine.submit('tsil')
    assert outcome.kind == 'rejected_not_a_word'
    assert outcome.title == 'Are you high?'
    assert outcome.message == 'tsil is not a real word.'
    assert engine.used_words == []


def test_dictionary_checked_before_letters(engine):
    # neither a word nor formable from the root
    assert engine.submit('zzz').kind == 'rejected_not_a_word'


def test_letter_mismatch_is_rejected(engine):
    outcome = engine.submit('tennis')
    assert outcome.kind == 'rejected_letter_mismatch'
    assert outcome.title == 'Please wear your prescriptive lens.'
    assert outcome.message == 'You can only use the same number of letters in the root word.'
    assert engine.score == 0


def test_dictionary_receives_configured_language():
    seen = []
    engine = RoundEngine(lambda word, language: seen.append(language) or True, language='fr')
    engine.start_round('chat')
    engine.submit('chat')
    assert seen == ['fr']


def test_root_word_and_single_letters_accepted_by_default(engine):
    assert engine.submit('listen').accepted
    assert engine.submit('i').accepted
    assert engine.score == 7


def test_root_word_rejected_when_configured(checker):
    engine = RoundEngine(checker, reject_root_word=True)
    engine.start_round('listen')
    outcome = engine.submit('listen')
    assert outcome.kind == 'rejected_trivial'
    assert outcome.message == 'listen is the root word.'
    assert engine.submit('silent').accepted


def test_minimum_length_when_configured(checker):
    engine = RoundEngine(checker, min_word_length=3)
    engine.start_round('listen')
    outcome = engine.submit('it')
    assert outcome.kind == 'rejected_too_short'
    assert outcome.message == 'Words must be at least 3 letters long.'
    assert engine.submit('').kind == 'rejected_empty'
    assert engine.submit('lit').accepted


def test_submit_without_root_word_never_accepts(checker):
    engine = RoundEngine(checker)
    assert engine.submit('cat').kind == 'rejected_letter_mismatch'


def test_start_round_clears_used_words_but_keeps_score(engine):
    engine.submit('lines')
    engine.start_round('bazaar')
    assert engine.root_word == 'bazaar'
    assert engine.used_words == []
    assert engine.score == 5
    # words are scoped per root word
    engine.start_round('listen')
    assert engine.submit('lines').accepted


def test_end_game_reports_and_resets(engine):
    engine.submit('lines')
    engine.submit('tin')
    summary = engine.end_game()
    assert summary.finalScore == 8
    assert summary.title == 'Game Ended.'
    assert summary.message == 'Your score is 8'
    assert engine.score == 0
    assert engine.used_words == []
    assert engine.status == 'ended'
    assert engine.root_word == 'listen'


def test_used_words_view_is_a_copy(engine):
    engine.submit('lines')
    engine.used_words.append('bogus')
    assert engine.used_words == ['lines']
