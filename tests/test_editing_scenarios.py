"""
End-to-end editing scenarios: lex, locate, select, rewrite, serialize.
"""

from query_tokens import TokenSequence


class TestEditingScenarios:
    """Chained edits through the public API."""
    
    def test_replace_fused_operator(self):
        """'a<=b' -> find '<=' -> replace with '<>'."""
        seq = TokenSequence("a<=b")
        assert seq.tokens == ["a", "<=", "b"]
        
        cursor = seq.find("<=")
        assert cursor.index == 1
        
        cursor.replace("<>")
        assert seq.tokens == ["a", "<>", "b"]
        assert str(seq) == "a <> b"
    
    def test_replace_table_after_from(self, select_seq):
        """find('from').select_next().replace('x') swaps the table name."""
        select_seq.find("from").select_next().replace("x")
        assert str(select_seq) == "select * from x"
    
    def test_chained_edits_from_returned_ranges(self, where_seq):
        """Each edit continues from the range the previous one returned."""
        written = where_seq.find("not in").replace("in")
        written = written.first().select_next().extend_right(
            lambda token, _i: token != ")"
        )
        written = written.extend_right(")").replace("(select id from u)")
        written.last().replace("OR")
        assert str(where_seq) == "a <= 1 and b in ( select id from u ) OR c != 'x'"
    
    def test_edits_are_visible_through_every_cursor(self, select_seq):
        """Cursors share the one underlying sequence."""
        head = select_seq.first()
        select_seq.find("*").replace(["id", ",", "name"])
        assert head.peek(4) == "select id , name"
    
    def test_stale_cursor_sees_shifted_tokens(self, select_seq):
        """Cursors are not rebased after an earlier splice."""
        table = select_seq.find("t")
        select_seq.find("*").replace(["a", ",", "b"])
        # The old index now points at a shifted token
        assert table.index == 3
        assert table.token() == "b"
    
    def test_wrap_condition_in_parentheses(self):
        """insert_before / insert_after around a selected run."""
        seq = TokenSequence("where a = 1")
        condition = seq.find("a").select(lambda _token, _i: True)
        condition.first().insert_before("(")
        seq.last().insert_after(")")
        assert str(seq) == "where ( a = 1 )"
    
    def test_uppercase_keywords_with_transform(self):
        """A range transform can rewrite a whole run at once."""
        seq = TokenSequence("select a from t where b is not null")
        everything = seq.first().select(lambda _token, _i: True)
        everything.replace(
            lambda tokens: [t.upper() if t.isalpha() or " " in t else t for t in tokens]
        )
        assert str(seq) == "SELECT A FROM T WHERE B IS NOT NULL"
    
    def test_remove_trailing_condition(self):
        """Selecting through to the end and replacing with nothing."""
        seq = TokenSequence("select * from t where x = 1")
        where = seq.find("where")
        tail = where.select(lambda _token, _i: True)
        tail.replace([])
        assert str(seq) == "select * from t"
