
import pygame
from catch_config import CONFIG

class Overlay:
    def __init__(self, config=None):
        self.config = CONFIG if config is None else config
        self.active=False
        self.items=[
            ("SPAWN_MS","Spawn every (ms)",500,5000,250),
            ("GRACE_MS","Caught display (ms)",500,6000,250),
            ("BASE_SPEED","Fall speed",0.5,10.0,0.5),
            ("SPEED_PER_POINT","Speed per point",0.0,1.0,0.05),
            ("BASKET_SPEED","Basket speed",2,40,1),
        ]
        self.index=0

    def toggle(self): self.active=not self.active

    def handle(self,e):
        if e.key in (pygame.K_ESCAPE,pygame.K_F1): self.toggle(); return
        if e.key==pygame.K_UP: self.index=(self.index-1)%len(self.items); return
        if e.key==pygame.K_DOWN: self.index=(self.index+1)%len(self.items); return
        key,label,lo,hi,step=self.items[self.index]
        val=self.config[key]
        if e.key==pygame.K_LEFT: self.config[key]=type(val)(round(max(lo,val-step),3))
        if e.key==pygame.K_RIGHT: self.config[key]=type(val)(round(min(hi,val+step),3))

    def draw(self,screen,font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,h-80),pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,(40,40))
        screen.blit(font.render("CONFIG (F1/Esc to close)",True,(230,240,255)),(60,56))
        y=100
        for i,(key,label,lo,hi,step) in enumerate(self.items):
            col=(255,255,255) if i==self.index else (200,210,235)
            v=self.config[key]
            txt=f"{label}: {v:.2f}" if isinstance(v,float) else f"{label}: {v}"
            screen.blit(font.render(txt,True,col),(60,y)); y+=30
