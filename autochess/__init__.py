"""
Console auto-battler - rekrutacja drużyny w budżecie, potem automatyczna bitwa.

Podmoduły:
- core: ConfigLoader + GameConfig (YAML z autochess/data/)
- units: Unit, UnitKind, Roster
- events: EventLogger
- simulation: BattleState, Battle
- recruitment: RecruitmentFlow
- game: Game (jedna rozgrywka)
"""
