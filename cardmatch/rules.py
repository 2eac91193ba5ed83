def can_play_card(card, top_card):
    """A card can be played on the top card if it shares its rank or its suit."""
    return card.rank == top_card.rank or card.suit == top_card.suit


def find_playable_index(hand, top_card):
    # first match in hand order, not the best one
    for i, card in enumerate(hand):
        if can_play_card(card, top_card):
            return i
    return None


def is_game_finished(player_one, player_two):
    return len(player_one) == 0 or len(player_two) == 0
