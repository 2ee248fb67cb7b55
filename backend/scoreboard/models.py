from scoreboard import db


class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    game_title = db.Column(db.String(128), nullable=False)
    game_image = db.Column(db.String(512), nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'game_title': self.game_title,
            'game_image': self.game_image,
        }


class Record(db.Model):
    __tablename__ = 'record'
    id = db.Column(db.Integer, primary_key=True)
    handle = db.Column(db.String(64), nullable=False)
    rank = db.Column(db.Integer, nullable=False)
    time = db.Column(db.String(64), nullable=False)
    game_id = db.Column(db.Integer, db.ForeignKey('game.id'), nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'handle': self.handle,
            'rank': self.rank,
            'time': self.time,
            'game_id': self.game_id,
        }
